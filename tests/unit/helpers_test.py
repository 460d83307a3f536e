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
import tempfile
from unittest import TestCase

from ds3.datatypes import BulkObject
from ds3.helpers import (bulk_objects_from_files, check_non_empty_string,
                         headers_to_strings, queryencode, quote)


class HelpersTest(TestCase):
    def test_quote(self):
        self.assertEqual("/my-bucket/a%20b~c", quote("/my-bucket/a b~c"))
        self.assertEqual("a%2Fb%3Dc%26d", queryencode("a/b=c&d"))

    def test_headers_to_strings(self):
        headers = {
            "Date": "Tue, 27 Mar 2007 19:36:42 +0000",
            "Authorization": "AWS access:c2lnbmF0dXJl",
        }
        self.assertEqual(
            "Date: Tue, 27 Mar 2007 19:36:42 +0000\n"
            "Authorization: AWS access:c2lnbmF0dXJl",
            headers_to_strings(headers),
        )
        self.assertEqual(
            "Date: Tue, 27 Mar 2007 19:36:42 +0000\n"
            "Authorization: AWS access:*REDACTED*",
            headers_to_strings(headers, redact=True),
        )

    def test_check_non_empty_string(self):
        check_non_empty_string("value")
        self.assertRaises(ValueError, check_non_empty_string, "")
        self.assertRaises(ValueError, check_non_empty_string, "  ")
        self.assertRaises(TypeError, check_non_empty_string, 1)

    def test_bulk_objects_from_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = []
            for name, size in [("one", 3), ("two", 0)]:
                path = os.path.join(tmpdir, name)
                with open(path, "wb") as file:
                    file.write(b"x" * size)
                paths.append(path)
            objects = bulk_objects_from_files(paths)
        self.assertEqual(
            [BulkObject(paths[0], 3), BulkObject(paths[1], 0)],
            objects.objects,
        )
        self.assertEqual(2, len(objects))
