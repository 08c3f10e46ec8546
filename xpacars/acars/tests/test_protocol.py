#!/usr/bin/env python3
# xpacars/acars/tests/test_protocol.py

import unittest

from xpacars.acars.data_models import FlightIdentity, PositionSample
from xpacars.acars.protocol import (
    encode_flight_registration,
    encode_position_report,
    decode_flight_id,
)

class TestFlightRegistrationBody(unittest.TestCase):
    def setUp(self):
        self.identity = FlightIdentity(
            icao="C172",
            tailnum="TF-ABC",
            description="Cessna 172P Skyhawk",
        )

    def test_exact_body(self):
        body = encode_flight_registration(self.identity)
        self.assertEqual(body, b"1\nC172\nTF-ABC\nCessna 172P Skyhawk\n")

    def test_four_lines_in_fixed_order(self):
        lines = encode_flight_registration(self.identity).decode().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines, ["1", "C172", "TF-ABC", "Cessna 172P Skyhawk"])

    def test_empty_fields_keep_their_lines(self):
        lines = encode_flight_registration(FlightIdentity("", "", "")).decode().split("\n")
        self.assertEqual(lines, ["1", "", "", "", ""])

    def test_non_ascii_description_is_utf8(self):
        body = encode_flight_registration(FlightIdentity("A320", "EC-ÑAB", "Airbus A320 Sevilla"))
        self.assertIn("EC-ÑAB".encode("utf-8"), body)

    def test_newline_in_field_is_not_escaped(self):
        body = encode_flight_registration(FlightIdentity("C172", "TF-ABC", "two\nlines"))
        self.assertEqual(len(body.decode().splitlines()), 5)

class TestPositionReportBody(unittest.TestCase):
    def setUp(self):
        self.sample = PositionSample(
            latitude=64.1306,
            longitude=-21.9406,
            altitude_m=609.6,
            track_deg=271.5,
            ground_speed_ms=46.3,
            air_speed_ms=48.0,
            vertical_speed_ms=-2.54,
        )

    def test_exact_body(self):
        body = encode_position_report(77, self.sample)
        self.assertEqual(
            body,
            b"1\n77\n64.130600\n-21.940600\n609.600000\n271.500000\n"
            b"46.300000\n48.000000\n-2.540000\n",
        )

    def test_nine_lines(self):
        lines = encode_position_report(1, self.sample).decode().splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[0], "1")
        self.assertEqual(lines[1], "1")

    def test_six_fractional_digits(self):
        sample = PositionSample(1 / 3, 0.0, 1e-7, 359.9999999, 0.0, 0.0, 0.0)
        lines = encode_position_report(9, sample).decode().splitlines()
        self.assertEqual(lines[2], "0.333333")
        self.assertEqual(lines[3], "0.000000")
        self.assertEqual(lines[4], "0.000000")
        self.assertEqual(lines[5], "360.000000")

    def test_large_flight_id(self):
        lines = encode_position_report(2 ** 63 - 1, self.sample).decode().splitlines()
        self.assertEqual(lines[1], "9223372036854775807")

class TestDecodeFlightId(unittest.TestCase):
    def test_leading_integer_with_trailing_text(self):
        self.assertEqual(decode_flight_id("42\nok"), 42)

    def test_bytes_body(self):
        self.assertEqual(decode_flight_id(b"77"), 77)

    def test_leading_whitespace_and_sign(self):
        self.assertEqual(decode_flight_id("  \t+15\r\n"), 15)

    def test_empty_body_is_invalid(self):
        self.assertLess(decode_flight_id(""), 1)
        self.assertEqual(decode_flight_id(b""), 0)

    def test_non_numeric_body_is_zero(self):
        self.assertEqual(decode_flight_id("created"), 0)
        self.assertEqual(decode_flight_id("id=42"), 0)

    def test_negative_is_invalid(self):
        self.assertEqual(decode_flight_id("-3"), -3)
        self.assertLess(decode_flight_id("-3"), 1)

    def test_overflow_clamps_to_int64(self):
        self.assertEqual(decode_flight_id("99999999999999999999"), 2 ** 63 - 1)
        self.assertEqual(decode_flight_id("-99999999999999999999"), -(2 ** 63))

if __name__ == '__main__':
    unittest.main()
