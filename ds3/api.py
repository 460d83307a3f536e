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

# pylint: disable=too-many-arguments
# pylint: disable=too-many-instance-attributes

"""
DS3 client to perform service, bucket, object and bulk operations.
"""

from __future__ import absolute_import, annotations

import os
from dataclasses import replace
from datetime import timedelta
from typing import BinaryIO, Iterator, Optional, TextIO, Union
from urllib.parse import urlsplit

import urllib3
from urllib3 import Retry

try:
    from urllib3.response import BaseHTTPResponse  # type: ignore[attr-defined]
except ImportError:
    from urllib3.response import HTTPResponse as BaseHTTPResponse

from urllib3.util import Timeout

from . import time, transport
from .credentials import Credentials
from .datatypes import (ListAllMyBucketsResult, ListBucketResult,
                        MasterObjectList, Object)
from .error import BadStatusCodeError, FailedRequestError, MissingArgsError
from .error import TransportHandleError
from .headerparser import HeaderParser, ResponseMetadata
from .helpers import (_DEFAULT_USER_AGENT, headers_to_strings, queryencode,
                      quote)
from .request import (HttpVerb, Request, get_bucket_request,
                      get_object_request, put_object_request)
from .signer import sign_v2
from .xml import marshal, unmarshal

_CHUNK_SIZE = 1024 * 1024
_HTTP_VERSIONS = {10: "HTTP/1.0", 11: "HTTP/1.1"}


def _header_lines(response: BaseHTTPResponse) -> Iterator[str]:
    """Yield raw status and header lines of a response."""
    version = _HTTP_VERSIONS.get(getattr(response, "version", 11), "HTTP/1.1")
    yield f"{version} {response.status} {response.reason or ''}\r\n"
    for key, value in response.headers.items():
        yield f"{key}: {value}\r\n"
    yield "\r\n"


class Client:
    """
    DS3 client performing one synchronous request/response exchange per
    call.
    """
    _endpoint: str
    _credentials: Credentials
    _proxy: Optional[str]
    _redirects: int
    _user_agent: str
    _trace_stream: Optional[TextIO]
    _http: Optional[urllib3.PoolManager]

    def __init__(
            self,
            endpoint: str,
            credentials: Credentials,
            proxy: Optional[str] = None,
            redirects: int = 5,
            http_client: Optional[urllib3.PoolManager] = None,
            cert_check: bool = True,
    ):
        """
        Initializes a new DS3 client object.

        Args:
            endpoint (str):
                URL of DS3 service, e.g. 'http://ds3.example.com:8080'.

            credentials (Credentials):
                Access ID and secret key of your account.

            proxy (Optional[str], default=None):
                URL of HTTP proxy to send requests through.

            redirects (int, default=5):
                Maximum number of redirects to follow.

            http_client (Optional[urllib3.PoolManager], default=None):
                Customized HTTP client.

            cert_check (bool, default=True):
                Flag to enable/disable server certificate validation
                for HTTPS connections.

        Example:
            >>> from ds3 import Client, Credentials
            >>> client = Client(
            ...     "http://ds3.example.com:8080",
            ...     Credentials("ACCESS-ID", "SECRET-KEY"),
            ... )
        """
        if not endpoint:
            raise MissingArgsError("endpoint must be provided")
        if credentials is None:
            raise MissingArgsError("credentials must be provided")
        url = urlsplit(endpoint)
        if url.scheme not in ("http", "https") or not url.netloc:
            raise ValueError(f"invalid endpoint {endpoint}")
        # Validate http client has correct base class.
        if http_client and not isinstance(http_client, urllib3.PoolManager):
            raise TypeError(
                "HTTP client should be urllib3.PoolManager like object, "
                f"got {type(http_client).__name__}",
            )
        if redirects < 0:
            raise ValueError(f"invalid redirect count {redirects}")

        self._endpoint = endpoint.rstrip("/")
        self._credentials = credentials
        self._proxy = proxy
        self._redirects = redirects
        self._cert_check = cert_check
        self._user_agent = _DEFAULT_USER_AGENT
        self._trace_stream = None
        self._ssl_context = transport.init()
        self._http = http_client

    @classmethod
    def from_env(cls, **kwargs) -> Client:
        """
        Create client from DS3_ENDPOINT, DS3_ACCESS_KEY, DS3_SECRET_KEY and
        optional http_proxy environment variables.
        """
        endpoint = os.environ.get("DS3_ENDPOINT")
        if not endpoint:
            raise MissingArgsError("DS3_ENDPOINT must be set")
        kwargs.setdefault("proxy", os.environ.get("http_proxy") or None)
        return cls(endpoint, Credentials.from_env(), **kwargs)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        if getattr(self, "_http", None) is not None:
            self._http.clear()

    def close(self):
        """Close connections held by this client."""
        if self._http is not None:
            self._http.clear()

    @property
    def endpoint(self) -> str:
        """Get endpoint."""
        return self._endpoint

    @property
    def credentials(self) -> Credentials:
        """Get credentials."""
        return self._credentials

    @property
    def proxy(self) -> Optional[str]:
        """Get proxy URL."""
        return self._proxy

    @property
    def redirects(self) -> int:
        """Get maximum number of redirects to follow."""
        return self._redirects

    def set_proxy(self, proxy: str):
        """
        Send subsequent requests through given HTTP proxy.

        Example:
            >>> client.set_proxy("http://proxy.example.com:3128")
        """
        if not proxy:
            raise ValueError("proxy must not be empty")
        self.close()
        self._proxy = proxy
        self._http = None

    def set_app_info(self, app_name: str, app_version: str):
        """
        Set your application name and version to user agent header.

        Example:
            >>> client.set_app_info("my_app", "1.0.2")
        """
        if not (app_name and app_version):
            raise ValueError("Application name/version cannot be empty.")
        self._user_agent = f"{_DEFAULT_USER_AGENT} {app_name}/{app_version}"

    def trace_on(self, stream: TextIO):
        """
        Enable http trace.

        Args:
            stream (TextIO):
                Stream for writing HTTP call tracing.

        Example:
            >>> client.trace_on(sys.stdout)
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        # Save new output stream.
        self._trace_stream = stream

    def trace_off(self):
        """Disable HTTP trace."""
        self._trace_stream = None

    def _get_http(self) -> urllib3.PoolManager:
        """Get HTTP transport handle; create it on first use."""
        if self._http is not None:
            return self._http

        timeout = timedelta(minutes=5).seconds
        kwargs = {
            "timeout": Timeout(connect=timeout, read=timeout),
            "maxsize": 1,
            "cert_reqs": 'CERT_REQUIRED' if self._cert_check else 'CERT_NONE',
        }
        if self._cert_check:
            kwargs["ssl_context"] = self._ssl_context
        try:
            self._http = (
                urllib3.ProxyManager(self._proxy, **kwargs) if self._proxy
                else urllib3.PoolManager(**kwargs)
            )
        except (ValueError, urllib3.exceptions.HTTPError) as exc:
            raise TransportHandleError(
                f"Failed to create HTTP transport handle: {exc}",
            ) from exc
        return self._http

    def _build_url(self, request: Request) -> str:
        """Build URL of the request."""
        url = self._endpoint + quote(request.path)
        if request.query_params:
            url += "?" + "&".join(
                f"{queryencode(key)}={queryencode(value)}"
                for key, value in request.query_params.items()
            )
        return url

    def _trace_request(
            self,
            method: str,
            url: str,
            headers: dict[str, str],
            body: Optional[Union[bytes, BinaryIO]],
    ):
        """Write request to trace stream."""
        if not self._trace_stream:
            return
        self._trace_stream.write("---------START-HTTP---------\n")
        split = urlsplit(url)
        query = ("?" + split.query) if split.query else ""
        self._trace_stream.write(f"{method} {split.path}{query} HTTP/1.1\n")
        self._trace_stream.write(headers_to_strings(headers, redact=True))
        self._trace_stream.write("\n")
        if isinstance(body, bytes):
            self._trace_stream.write("\n")
            self._trace_stream.write(body.decode(errors="replace"))
            self._trace_stream.write("\n")
        self._trace_stream.write("\n")

    def _trace_response(self, metadata: ResponseMetadata, data: bytes):
        """Write response to trace stream."""
        if not self._trace_stream:
            return
        self._trace_stream.write(
            f"HTTP/1.1 {metadata.status_code} {metadata.status_message}\n",
        )
        self._trace_stream.write(headers_to_strings(metadata.headers))
        self._trace_stream.write("\n")
        if data:
            self._trace_stream.write("\n")
            self._trace_stream.write(data.decode(errors="replace"))
            self._trace_stream.write("\n")
        self._trace_stream.write("----------END-HTTP----------\n")

    def execute(
            self,
            request: Request,
            body: Optional[Union[bytes, BinaryIO]] = None,
            writer: Optional[BinaryIO] = None,
    ) -> tuple[bytes, ResponseMetadata]:
        """
        Sign and perform one HTTP exchange.

        Args:
            request (Request):
                Request to execute.

            body (Optional[Union[bytes, BinaryIO]], default=None):
                Upload body of request's declared length; used for PUT and
                POST only.

            writer (Optional[BinaryIO], default=None):
                Stream receiving response body of a successful response.
                If not set, response body is returned.

        Returns:
            tuple[bytes, ResponseMetadata]:
                Response body (empty if streamed to writer) and response
                status and headers.
        """
        if request is None:
            raise MissingArgsError(
                "All arguments must be filled in for request processing",
            )

        method = request.verb.value
        url = self._build_url(request)
        headers = dict(request.headers)
        headers["User-Agent"] = self._user_agent
        if request.verb not in (HttpVerb.PUT, HttpVerb.POST):
            body = None
        if body is not None:
            headers["Content-Length"] = str(request.length)
        headers = sign_v2(
            method,
            quote(request.path),
            headers,
            self._credentials,
            time.to_date_header(time.localnow()),
        )

        self._trace_request(method, url, headers, body)

        http = self._get_http()
        try:
            response = http.urlopen(
                method,
                url,
                body=body,
                headers=headers,
                preload_content=False,
                redirect=True,
                retries=Retry(
                    total=None,
                    connect=0,
                    read=0,
                    status=0,
                    other=0,
                    redirect=self._redirects,
                ),
            )
        except urllib3.exceptions.HTTPError as exc:
            raise FailedRequestError(f"Request failed: {exc}") from exc

        try:
            parser = HeaderParser()
            parser.feed_lines(_header_lines(response))
            metadata = parser.metadata()
            success = 200 <= metadata.status_code < 300
            data = b""
            if success and writer is not None:
                for chunk in response.stream(_CHUNK_SIZE):
                    writer.write(chunk)
            else:
                data = response.read()
        except urllib3.exceptions.HTTPError as exc:
            raise FailedRequestError(f"Request failed: {exc}") from exc
        finally:
            response.release_conn()

        self._trace_response(metadata, data)

        if not success:
            raise BadStatusCodeError(
                metadata.status_code, metadata.status_message, data,
            )
        return data, metadata

    def get_service(self, request: Request) -> ListAllMyBucketsResult:
        """
        List all buckets of the user.

        Example:
            >>> result = client.get_service(get_service_request())
            >>> for bucket in result.buckets:
            ...     print(bucket.name, bucket.creation_date)
        """
        data, _ = self.execute(request)
        return unmarshal(ListAllMyBucketsResult, data)

    def get_bucket(self, request: Request) -> ListBucketResult:
        """
        List objects of a bucket; one page of the listing.

        Example:
            >>> result = client.get_bucket(get_bucket_request("my-bucket"))
            >>> for obj in result.objects:
            ...     print(obj.name, obj.size)
        """
        data, _ = self.execute(request)
        return unmarshal(ListBucketResult, data)

    def list_objects(
            self,
            bucket_name: str,
            prefix: Optional[str] = None,
            delimiter: Optional[str] = None,
            max_keys: Optional[int] = None,
    ) -> Iterator[Object]:
        """
        Iterate all objects of a bucket, fetching following pages while
        the listing is truncated.

        Example:
            >>> for obj in client.list_objects("my-bucket", prefix="logs/"):
            ...     print(obj.name)
        """
        marker: Optional[str] = None
        while True:
            result = self.get_bucket(
                get_bucket_request(
                    bucket_name,
                    prefix=prefix,
                    delimiter=delimiter,
                    marker=marker,
                    max_keys=max_keys,
                ),
            )
            yield from result.objects
            if not result.is_truncated:
                return
            marker = result.next_marker or (
                result.objects[-1].name if result.objects else None
            )
            if not marker:
                return

    def put_bucket(self, request: Request):
        """
        Create a bucket.

        Example:
            >>> client.put_bucket(put_bucket_request("my-bucket"))
        """
        self.execute(request)

    def delete_bucket(self, request: Request):
        """
        Delete an empty bucket.

        Example:
            >>> client.delete_bucket(delete_bucket_request("my-bucket"))
        """
        self.execute(request)

    def head_bucket(self, request: Request) -> ResponseMetadata:
        """Get response metadata of a HEAD bucket request."""
        return self.execute(request)[1]

    def head_object(self, request: Request) -> ResponseMetadata:
        """Get response metadata of a HEAD object request."""
        return self.execute(request)[1]

    def get_object(
            self,
            request: Request,
            writer: BinaryIO,
    ) -> ResponseMetadata:
        """
        Download an object into given writer.

        Example:
            >>> with open("my-filename", "wb") as writer:
            ...     client.get_object(
            ...         get_object_request("my-bucket", "my-object"),
            ...         writer,
            ...     )
        """
        if writer is None:
            raise MissingArgsError("writer must be provided")
        return self.execute(request, writer=writer)[1]

    def put_object(
            self,
            request: Request,
            reader: Optional[BinaryIO] = None,
    ) -> ResponseMetadata:
        """
        Upload an object of request's declared length read from given
        reader. Without reader, an empty PUT request is sent.

        Example:
            >>> with open("my-filename", "rb") as reader:
            ...     client.put_object(
            ...         put_object_request("my-bucket", "my-object", 1024),
            ...         reader,
            ...     )
        """
        return self.execute(request, body=reader)[1]

    def delete_object(self, request: Request):
        """
        Delete an object.

        Example:
            >>> client.delete_object(
            ...     delete_object_request("my-bucket", "my-object"),
            ... )
        """
        self.execute(request)

    def fget_object(
            self,
            bucket_name: str,
            object_name: str,
            file_path: str,
    ) -> ResponseMetadata:
        """
        Download an object into a file.

        Example:
            >>> client.fget_object("my-bucket", "my-object", "my-filename")
        """
        if os.path.isdir(file_path):
            raise ValueError(f"file {file_path} is a directory")

        tmp_file_path = file_path + ".part.ds3"
        with open(tmp_file_path, "wb") as writer:
            metadata = self.get_object(
                get_object_request(bucket_name, object_name), writer,
            )
        os.replace(tmp_file_path, file_path)
        return metadata

    def fput_object(
            self,
            bucket_name: str,
            object_name: str,
            file_path: str,
    ) -> ResponseMetadata:
        """
        Upload a file as an object.

        Example:
            >>> client.fput_object("my-bucket", "my-object", "my-filename")
        """
        with open(file_path, "rb") as reader:
            length = os.fstat(reader.fileno()).st_size
            return self.put_object(
                put_object_request(bucket_name, object_name, length),
                reader,
            )

    def bulk(self, request: Request) -> MasterObjectList:
        """
        Start a bulk GET or PUT job. The manifest of request's objects is
        sent and the job manifest assigned by the server is returned; its
        chunks partition the requested objects.

        Example:
            >>> objects = BulkObjectList(
            ...     [BulkObject("a", 10), BulkObject("b", 20)],
            ... )
            >>> job = client.bulk(put_bulk_request("my-bucket", objects))
            >>> for chunk in job.chunks:
            ...     print(chunk.chunk_number, [obj.name for obj in chunk])
        """
        if request is None:
            raise MissingArgsError(
                "All arguments must be filled in for request processing",
            )
        if not request.object_list:
            raise MissingArgsError(
                "The bulk command requires a list of objects to process",
            )

        body = marshal(request.object_list)
        data, _ = self.execute(replace(request, length=len(body)), body=body)
        return unmarshal(MasterObjectList, data)
