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

from ds3 import Client, Credentials
from ds3.datatypes import BulkObject, BulkObjectList
from ds3.request import get_bulk_request

client = Client(
    "http://ds3.example.com:8080",
    Credentials("ACCESS-ID", "SECRET-KEY"),
)

# Start a bulk GET job and download objects chunk by chunk.
objects = BulkObjectList([BulkObject("my-object1"), BulkObject("my-object2")])
job = client.bulk(get_bulk_request("my-bucket", objects))
for chunk in job.chunks:
    for obj in chunk:
        client.fget_object("my-bucket", obj.name, obj.name)
