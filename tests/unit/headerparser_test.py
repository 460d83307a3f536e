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

from ds3.error import ErrorCode, FailedRequestError, HeaderParseError
from ds3.headerparser import HeaderParser, ParserState, ResponseMetadata


class HeaderParserTest(TestCase):
    def test_status_line(self):
        parser = HeaderParser()
        parser.feed("HTTP/1.1 200 OK\r\n")
        self.assertEqual(ParserState.READING_HEADERS, parser.state)
        self.assertEqual(200, parser.status_code)
        self.assertEqual("OK", parser.status_message)

    def test_continue_is_ignored(self):
        parser = HeaderParser()
        parser.feed_lines([
            "HTTP/1.1 100 Continue\r\n",
            "\r\n",
            "HTTP/1.1 201 Created\r\n",
            "\r\n",
        ])
        self.assertEqual(ParserState.DONE, parser.state)
        self.assertEqual(201, parser.status_code)
        self.assertEqual("Created", parser.status_message)
        self.assertEqual({}, parser.headers)

    def test_continue_keeps_awaiting_status_line(self):
        parser = HeaderParser()
        parser.feed("HTTP/1.1 100 Continue")
        self.assertEqual(ParserState.AWAITING_STATUS_LINE, parser.state)
        self.assertEqual(0, parser.status_code)

    def test_multi_word_status_message(self):
        parser = HeaderParser()
        parser.feed("HTTP/1.0 404   Not    Found")
        self.assertEqual(404, parser.status_code)
        self.assertEqual("Not Found", parser.status_message)

    def test_missing_status_message(self):
        parser = HeaderParser()
        parser.feed("HTTP/1.1 204")
        self.assertEqual(204, parser.status_code)
        self.assertEqual("", parser.status_message)

    def test_blank_line_before_status_line(self):
        parser = HeaderParser()
        parser.feed("\r\n")
        self.assertEqual(ParserState.AWAITING_STATUS_LINE, parser.state)
        parser.feed("HTTP/1.1 200 OK\r\n")
        self.assertEqual(ParserState.READING_HEADERS, parser.state)

    def test_headers(self):
        parser = HeaderParser()
        parser.feed_lines([
            b"HTTP/1.1 200 OK\r\n",
            b"X-Amz-RequestId: abc123\r\n",
            b"Content-Type: application/xml\r\n",
            b"\r\n",
        ])
        self.assertEqual(ParserState.DONE, parser.state)
        self.assertEqual(
            {
                "X-Amz-RequestId": "abc123",
                "Content-Type": "application/xml",
            },
            parser.headers,
        )

    def test_header_value_with_separator(self):
        parser = HeaderParser()
        parser.feed_lines(["HTTP/1.1 200 OK", "Location: http://a: b"])
        self.assertEqual("http://a: b", parser.headers["Location"])

    def test_duplicate_header_last_value_wins(self):
        parser = HeaderParser()
        parser.feed_lines([
            "HTTP/1.1 200 OK",
            "X-Dup: first",
            "X-Dup: second",
        ])
        self.assertEqual({"X-Dup": "second"}, parser.headers)

    def test_malformed_header_is_skipped(self):
        parser = HeaderParser()
        with self.assertLogs("ds3.headerparser", level="WARNING"):
            parser.feed_lines([
                "HTTP/1.1 200 OK",
                "NoSeparatorHere",
                "X-Good: yes",
            ])
        self.assertEqual({"X-Good": "yes"}, parser.headers)

    def test_new_response_after_done(self):
        parser = HeaderParser()
        parser.feed_lines([
            "HTTP/1.1 307 Temporary Redirect",
            "Location: http://other/",
            "",
            "HTTP/1.1 200 OK",
            "X-Final: true",
            "",
        ])
        self.assertEqual(200, parser.status_code)
        self.assertEqual("OK", parser.status_message)
        self.assertEqual({"X-Final": "true"}, parser.headers)

    def test_unsupported_protocol(self):
        parser = HeaderParser()
        with self.assertRaises(HeaderParseError) as ctx:
            parser.feed("SPDY/3 200 OK")
        self.assertEqual(ErrorCode.FAILED_REQUEST, ctx.exception.code)
        self.assertEqual("SPDY/3 200 OK", ctx.exception.line)
        self.assertIsInstance(ctx.exception, FailedRequestError)

    def test_malformed_status_code(self):
        for line in ["HTTP/1.1 abc OK", "HTTP/1.1", "HTTP/1.1 000 Zero"]:
            parser = HeaderParser()
            self.assertRaises(HeaderParseError, parser.feed, line)

    def test_metadata(self):
        parser = HeaderParser()
        parser.feed_lines(["HTTP/1.1 200 OK", "ETag: \"abc\"", ""])
        metadata = parser.metadata()
        self.assertEqual(
            ResponseMetadata(200, "OK", {"ETag": "\"abc\""}), metadata,
        )
        # metadata is a snapshot
        parser.headers["ETag"] = "changed"
        self.assertEqual("\"abc\"", metadata.headers["ETag"])
