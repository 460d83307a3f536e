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

import sys

from ds3 import Client
from ds3.helpers import bulk_objects_from_files
from ds3.request import put_bulk_request

client = Client.from_env()

# Trace HTTP exchanges to standard output.
client.trace_on(sys.stdout)

# Start a bulk PUT job of given files.
objects = bulk_objects_from_files(["my-filename1", "my-filename2"])
job = client.bulk(put_bulk_request("my-bucket", objects))
print("job:", job.job_id, "objects:", job.object_count)

# Upload each chunk in the order the server assigned.
for chunk in job.chunks:
    for obj in chunk:
        client.fput_object("my-bucket", obj.name, obj.name)
