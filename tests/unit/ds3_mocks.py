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

import http.client as httplib


class MockResponse:
    def __init__(self, method, url, headers, status_code,
                 response_headers=None, content=None, reason=None):
        self.method = method
        self.url = url
        self.request_headers = {
            key.lower(): value for key, value in headers.items()
        }
        self.status = status_code
        self.version = 11
        self.headers = response_headers or {}
        self.data = content or b""
        self.reason = (
            httplib.responses.get(status_code, "") if reason is None
            else reason
        )
        self.body = None
        self.sent_headers = {}
        self.released = False

    # noinspection PyUnusedLocal
    def read(self, amt=None):
        return self.data

    def mock_verify(self, method, url, headers):
        assert self.method == method, f"{self.method} != {method}"
        assert self.url == url, f"{self.url} != {url}"
        sent = {key.lower(): value for key, value in headers.items()}
        for header, value in self.request_headers.items():
            assert sent.get(header) == value, f"{header}: {sent.get(header)}"
        self.sent_headers = headers

    # noinspection PyUnusedLocal
    def stream(self, amt=1024, decode_content=None):
        for i in range(0, len(self.data), amt):
            yield self.data[i:i + amt]

    # dummy release connection call.
    def release_conn(self):
        self.released = True


class MockConnection:
    def __init__(self):
        self.requests = []
        self.last_kwargs = {}

    def mock_add_request(self, request):
        self.requests.append(request)

    # noinspection PyUnusedLocal
    def request(self, method, url, headers, body=None):
        return_request = self.requests.pop(0)
        return_request.mock_verify(method, url, headers)
        if hasattr(body, "read"):
            body = body.read()
        return_request.body = body
        return return_request

    # noinspection PyRedeclaration,PyUnusedLocal,PyUnusedLocal
    def urlopen(self, method, url, headers=None, body=None,
                preload_content=False, **kwargs):
        self.last_kwargs = kwargs
        return self.request(method, url, headers or {}, body)

    def clear(self):
        return
