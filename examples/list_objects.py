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

client = Client(
    "http://ds3.example.com:8080",
    Credentials("ACCESS-ID", "SECRET-KEY"),
)

# List objects information.
for obj in client.list_objects("my-bucket"):
    print(obj.name, obj.size, obj.last_modified)

# List objects information whose names starts with "my/prefix/".
for obj in client.list_objects("my-bucket", prefix="my/prefix/"):
    print(obj.name)

# List objects of first level under "my/prefix/" only.
for obj in client.list_objects(
        "my-bucket", prefix="my/prefix/", delimiter="/",
):
    print(obj.name)
