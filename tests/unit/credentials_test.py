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

import os
from unittest import TestCase, mock

from ds3.credentials import Credentials
from ds3.error import ErrorCode, MissingArgsError


class CredentialsTest(TestCase):
    def test_credentials(self):
        creds = Credentials("access", "secret")
        self.assertEqual("access", creds.access_id)
        self.assertEqual("secret", creds.secret_key)

    def test_secret_key_not_in_repr(self):
        self.assertNotIn("secret", repr(Credentials("access", "secret")))

    def test_empty_access_id(self):
        with self.assertRaises(MissingArgsError) as ctx:
            Credentials("", "secret")
        self.assertEqual(ErrorCode.MISSING_ARGS, ctx.exception.code)

    def test_empty_secret_key(self):
        self.assertRaises(MissingArgsError, Credentials, "access", "")

    @mock.patch.dict(
        os.environ,
        {"DS3_ACCESS_KEY": "env-access", "DS3_SECRET_KEY": "env-secret"},
    )
    def test_from_env(self):
        creds = Credentials.from_env()
        self.assertEqual("env-access", creds.access_id)
        self.assertEqual("env-secret", creds.secret_key)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_from_env_missing(self):
        self.assertRaises(MissingArgsError, Credentials.from_env)
