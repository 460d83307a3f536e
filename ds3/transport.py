# -*- coding: utf-8 -*-
# DS3 Python Library for S3 Compatible Bulk Object Storage, (C)
# 2026 DS3 SDK Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Process wide HTTP transport state. The TLS context loaded from CA
certificates is created once no matter how many clients exist and is
dropped by cleanup() at process exit.
"""

from __future__ import absolute_import, annotations

import atexit
import logging
import os
import ssl
import threading
from typing import Optional

import certifi

from .error import TransportHandleError

log = logging.getLogger(__name__)

_LOCK = threading.Lock()
_SSL_CONTEXT: Optional[ssl.SSLContext] = None
_ATEXIT_REGISTERED = False


def init() -> ssl.SSLContext:
    """Initialize transport if not yet done and return the TLS context."""
    global _SSL_CONTEXT, _ATEXIT_REGISTERED  # pylint: disable=global-statement
    with _LOCK:
        if _SSL_CONTEXT is None:
            # Load CA certificates from SSL_CERT_FILE file if set
            cafile = os.environ.get("SSL_CERT_FILE") or certifi.where()
            try:
                _SSL_CONTEXT = ssl.create_default_context(cafile=cafile)
            except (OSError, ssl.SSLError) as exc:
                raise TransportHandleError(
                    f"Encountered an error initializing transport: {exc}",
                ) from exc
            log.debug("transport initialized with CA file %s", cafile)
            if not _ATEXIT_REGISTERED:
                atexit.register(cleanup)
                _ATEXIT_REGISTERED = True
        return _SSL_CONTEXT


def is_initialized() -> bool:
    """Check whether transport is initialized."""
    with _LOCK:
        return _SSL_CONTEXT is not None


def cleanup():
    """Release process wide transport state; safe to call repeatedly."""
    global _SSL_CONTEXT  # pylint: disable=global-statement
    with _LOCK:
        _SSL_CONTEXT = None
