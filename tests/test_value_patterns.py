"""
Tests for the Value Pattern Matchers.

Each predicate is tested on its own, without a taxonomy or data handle.
"""

import pytest

from harborcheck.services.value_patterns import (
    is_date,
    is_email,
    is_iban,
    is_ip_address,
    is_name,
    is_ssn,
    is_url,
    is_vin,
    is_zip_code,
)


ALL_PREDICATES = [
    is_zip_code, is_date, is_email, is_ssn, is_iban,
    is_vin, is_url, is_ip_address, is_name,
]


class TestMalformedInput:
    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_none_is_non_match(self, predicate):
        assert predicate(None) is False

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_blank_is_non_match(self, predicate):
        assert predicate("   ") is False

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_number_is_non_match(self, predicate):
        assert predicate(12345) is False


class TestZipCode:
    def test_five_digits(self):
        assert is_zip_code("12345") is True

    def test_zip_plus_four(self):
        assert is_zip_code("12345-6789") is True

    def test_surrounding_whitespace(self):
        assert is_zip_code(" 02139 ") is True

    def test_four_digits(self):
        assert is_zip_code("1234") is False

    def test_six_digits(self):
        assert is_zip_code("123456") is False

    def test_short_extension(self):
        assert is_zip_code("12345-67") is False

    def test_nine_digits_without_dash(self):
        assert is_zip_code("123456789") is False


class TestDate:
    def test_us_slashes(self):
        assert is_date("12/31/2020") is True

    def test_european_dots(self):
        assert is_date("31.12.2020") is True

    def test_two_digit_year(self):
        assert is_date("1-2-99") is True

    def test_iso(self):
        assert is_date("2020-03-12") is True

    def test_iso_with_time(self):
        assert is_date("2020-01-15 00:00:00") is True

    def test_iso_with_t_separator(self):
        assert is_date("2020-01-15T08:30") is True

    def test_iso_with_malformed_time(self):
        assert is_date("2020-01-15 8h30") is False

    def test_day_month_name_year(self):
        assert is_date("12 March 2020") is True

    def test_month_name_day_year(self):
        assert is_date("Mar 12, 2020") is True

    def test_month_name_year(self):
        assert is_date("september 1999") is True

    def test_year_alone(self):
        assert is_date("1999") is True

    def test_arbitrary_four_digit_number(self):
        assert is_date("1234") is False

    def test_impossible_month_iso(self):
        assert is_date("2020-13-01") is False

    def test_impossible_day_and_month(self):
        assert is_date("45/45/2020") is False

    def test_mixed_separators(self):
        assert is_date("12/31-2020") is False

    def test_ssn_is_not_a_date(self):
        assert is_date("123-45-6789") is False

    def test_free_text(self):
        assert is_date("hello") is False


class TestEmail:
    def test_simple(self):
        assert is_email("a@b.com") is True

    def test_subdomain_and_plus(self):
        assert is_email("jane.doe+tag@mail.example.org") is True

    def test_single_letter_tld(self):
        assert is_email("a@b.c") is True

    def test_missing_dot_in_domain(self):
        assert is_email("a@localhost") is False

    def test_missing_at(self):
        assert is_email("not-an-email") is False

    def test_double_at(self):
        assert is_email("a@@b.com") is False


class TestSSN:
    def test_dashed(self):
        assert is_ssn("123-45-6789") is True

    def test_plain_digits(self):
        assert is_ssn("123456789") is True

    def test_wrong_grouping(self):
        assert is_ssn("123-456-789") is False

    def test_too_short(self):
        assert is_ssn("12345678") is False


class TestIBAN:
    def test_grouped_german_iban(self):
        assert is_iban("DE89 3704 0044 0532 0130 00") is True

    def test_compact_uk_iban(self):
        assert is_iban("GB82WEST12345698765432") is True

    def test_letters_inside_bban(self):
        assert is_iban("RO49AAAA1B31007593840000") is True

    def test_bban_too_short(self):
        assert is_iban("DE89370400440") is False

    def test_prefix_only(self):
        assert is_iban("DE89") is False

    def test_digits_only(self):
        assert is_iban("1234567890123456") is False

    def test_too_long(self):
        assert is_iban("DE89" + "1" * 31) is False


class TestVIN:
    def test_valid(self):
        assert is_vin("1HGCM82633A004352") is True

    def test_sixteen_characters(self):
        assert is_vin("1HGCM82633A00435") is False

    @pytest.mark.parametrize("letter", ["I", "O", "Q"])
    def test_excluded_letters(self, letter):
        assert is_vin("1HGCM82633A00435" + letter) is False

    def test_punctuation(self):
        assert is_vin("1HGCM-82633A00435") is False


class TestURL:
    def test_https(self):
        assert is_url("https://example.com/path?q=1") is True

    def test_http_uppercase_scheme(self):
        assert is_url("HTTP://EXAMPLE.COM") is True

    def test_ftp(self):
        assert is_url("ftp://files.example.org/pub") is True

    def test_missing_scheme(self):
        assert is_url("www.example.com") is False

    def test_other_scheme(self):
        assert is_url("mailto:jane@example.com") is False

    def test_missing_host(self):
        assert is_url("https://") is False


class TestIPAddress:
    def test_ipv4(self):
        assert is_ip_address("192.168.0.1") is True

    def test_ipv6_full(self):
        assert is_ip_address("2001:0db8:85a3:0000:0000:8a2e:0370:7334") is True

    def test_ipv6_compressed(self):
        assert is_ip_address("fe80::1") is True

    def test_octet_out_of_range(self):
        assert is_ip_address("256.1.1.1") is False

    def test_three_octets(self):
        assert is_ip_address("10.0.1") is False

    def test_text(self):
        assert is_ip_address("localhost") is False


class TestName:
    def test_single_name(self):
        assert is_name("Jane") is True

    def test_full_name(self):
        assert is_name("Mary Ann Smith") is True

    def test_hyphen_and_apostrophe(self):
        assert is_name("Mary-Jane O'Neil") is True

    def test_lowercase(self):
        assert is_name("jane doe") is False

    def test_all_caps(self):
        assert is_name("JANE") is False

    def test_digits(self):
        assert is_name("Jane2") is False

    def test_too_many_tokens(self):
        assert is_name("One Two Three Four Five") is False
