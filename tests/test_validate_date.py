from datetime import datetime, timedelta, timezone
import unittest
from data_design.exceptions import InvalidArgumentError, OutOfRangeError
from data_design.validation import (current_time,
                                    to_epoch_milliseconds,
                                    validate_date_time)


class TestValidateDateTime(unittest.TestCase):

    def test_aware_datetime_is_kept(self):
        value = datetime(2018, 1, 15, 9, 30, tzinfo=timezone(timedelta(hours=-7)))
        self.assertIs(validate_date_time(value), value)

    def test_naive_datetime_is_taken_as_utc(self):
        result = validate_date_time(datetime(2018, 1, 15, 9, 30))
        self.assertEqual(result, datetime(2018, 1, 15, 9, 30,
                                          tzinfo=timezone.utc))

    def test_string_without_fraction(self):
        self.assertEqual(validate_date_time("2018-01-15 09:30:05"),
                         datetime(2018, 1, 15, 9, 30, 5, tzinfo=timezone.utc))

    def test_string_with_microseconds_and_t_separator(self):
        self.assertEqual(
            validate_date_time("2018-01-15T09:30:05.123456"),
            datetime(2018, 1, 15, 9, 30, 5, 123456, tzinfo=timezone.utc))

    def test_short_fraction_is_padded(self):
        result = validate_date_time("2018-01-15 09:30:05.5")
        self.assertEqual(result.microsecond, 500000)

    def test_badly_formatted_string_is_invalid_argument(self):
        for value in ["", "yesterday", "2018-01-15", "15/01/2018 09:30:05",
                      "2018-01-15 09:30"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgumentError):
                    validate_date_time(value)

    def test_non_existent_date_is_out_of_range(self):
        for value in ["2018-02-30 00:00:00", "2018-13-01 00:00:00",
                      "2018-01-01 24:00:00", "2018-01-01 12:61:00"]:
            with self.subTest(value=value):
                with self.assertRaises(OutOfRangeError):
                    validate_date_time(value)

    def test_unsupported_type_is_invalid_argument(self):
        with self.assertRaises(InvalidArgumentError):
            validate_date_time(1516008605)


class TestTimeHelpers(unittest.TestCase):

    def test_current_time_is_aware_utc(self):
        now = current_time()
        self.assertEqual(now.tzinfo, timezone.utc)

    def test_epoch_milliseconds(self):
        value = datetime(1970, 1, 1, 0, 0, 1, 250000, tzinfo=timezone.utc)
        self.assertEqual(to_epoch_milliseconds(value), 1250)
