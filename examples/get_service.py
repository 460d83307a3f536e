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
from ds3.request import get_service_request

client = Client(
    "http://ds3.example.com:8080",
    Credentials("ACCESS-ID", "SECRET-KEY"),
)

result = client.get_service(get_service_request())
print("owner:", result.owner.display_name if result.owner else None)
for bucket in result.buckets:
    print(bucket.name, bucket.creation_date)
