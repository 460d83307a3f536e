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

from unittest import TestCase

from ds3.datatypes import BulkObject, BulkObjectList
from ds3.request import (HttpVerb, Request, delete_bucket_request,
                         delete_object_request, get_bucket_request,
                         get_bulk_request, get_object_request,
                         get_service_request, head_bucket_request,
                         head_object_request, put_bucket_request,
                         put_bulk_request, put_object_request)


class RequestTest(TestCase):
    def test_get_service(self):
        request = get_service_request()
        self.assertEqual(HttpVerb.GET, request.verb)
        self.assertEqual("/", request.path)
        self.assertEqual({}, request.headers)
        self.assertEqual({}, request.query_params)
        self.assertIsNone(request.object_list)

    def test_bucket_requests(self):
        for factory, verb in [
            (get_bucket_request, HttpVerb.GET),
            (put_bucket_request, HttpVerb.PUT),
            (delete_bucket_request, HttpVerb.DELETE),
            (head_bucket_request, HttpVerb.HEAD),
        ]:
            request = factory("my-bucket")
            self.assertEqual(verb, request.verb)
            self.assertEqual("/my-bucket", request.path)
            self.assertEqual(0, request.length)

    def test_object_requests(self):
        for factory, verb in [
            (get_object_request, HttpVerb.GET),
            (delete_object_request, HttpVerb.DELETE),
            (head_object_request, HttpVerb.HEAD),
        ]:
            request = factory("my-bucket", "dir/my-object")
            self.assertEqual(verb, request.verb)
            self.assertEqual("/my-bucket/dir/my-object", request.path)

    def test_put_object(self):
        request = put_object_request("my-bucket", "my-object", 1024)
        self.assertEqual(HttpVerb.PUT, request.verb)
        self.assertEqual("/my-bucket/my-object", request.path)
        self.assertEqual(1024, request.length)
        self.assertRaises(
            ValueError, put_object_request, "my-bucket", "my-object", -1,
        )

    def test_get_bucket_query(self):
        request = get_bucket_request(
            "my-bucket",
            prefix="logs/",
            delimiter="/",
            marker="logs/a",
            max_keys=100,
        )
        self.assertEqual(
            [
                ("prefix", "logs/"),
                ("delimiter", "/"),
                ("marker", "logs/a"),
                ("max-keys", "100"),
            ],
            list(request.query_params.items()),
        )

    def test_empty_names(self):
        self.assertRaises(ValueError, put_bucket_request, "")
        self.assertRaises(ValueError, get_object_request, "my-bucket", " ")
        self.assertRaises(ValueError, get_object_request, "", "my-object")
        self.assertRaises(TypeError, put_bucket_request, None)

    def test_bulk_requests(self):
        objects = BulkObjectList([BulkObject("a", 10), BulkObject("b", 20)])
        for factory, operation in [
            (get_bulk_request, "start_bulk_get"),
            (put_bulk_request, "start_bulk_put"),
        ]:
            request = factory("my-bucket", objects)
            self.assertEqual(HttpVerb.PUT, request.verb)
            self.assertEqual("/_rest_/bucket/my-bucket", request.path)
            self.assertEqual({"operation": operation}, request.query_params)
            self.assertIs(objects, request.object_list)

    def test_str(self):
        self.assertEqual(
            "Verb: DELETE\nPath: /my-bucket",
            str(delete_bucket_request("my-bucket")),
        )

    def test_requests_are_independent(self):
        first = Request(HttpVerb.GET, "/")
        second = Request(HttpVerb.GET, "/")
        first.headers["X-Test"] = "1"
        self.assertEqual({}, second.headers)
