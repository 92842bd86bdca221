"""Tests for envir_core.builder — the inference cascade."""

from ipaddress import IPv4Address, IPv6Address

import pytest

from envir_core import (
    Snapshot,
    SocketAddress,
    VArray,
    VBool,
    VFloat,
    VInt,
    VIpAddr,
    VSocketAddr,
    VText,
    as_str,
    build_value,
    split_array,
)


# ---------------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", VInt(10, "10")),
        ("0x1F", VInt(31, "0x1F")),
        ("0o17", VInt(15, "0o17")),
        ("0b101", VInt(5, "0b101")),
        ("3.14", VFloat(3.14, "3.14")),
        ("t", VBool(True, "t")),
        ("true", VBool(True, "true")),
        ("TRUE", VBool(True, "TRUE")),
        ("f", VBool(False, "f")),
        ("false", VBool(False, "false")),
        ("FALSE", VBool(False, "FALSE")),
        ("127.0.0.1", VIpAddr(IPv4Address("127.0.0.1"), "127.0.0.1")),
        ("::1", VIpAddr(IPv6Address("::1"), "::1")),
        ("hello", VText("hello")),
        ("", VText("")),
    ],
)
def test_scalar_inference(text, expected):
    assert build_value(text) == expected


def test_integer_wins_over_float():
    assert isinstance(build_value("42"), VInt)


def test_socket_address_is_not_an_array():
    v = build_value("127.0.0.1:8080")
    assert v == VSocketAddr(SocketAddress(IPv4Address("127.0.0.1"), 8080), "127.0.0.1:8080")


def test_bracketed_ipv6_socket():
    v = build_value("[::1]:443")
    assert isinstance(v, VSocketAddr)
    assert v.value.port == 443


def test_overflow_falls_through_to_float():
    v = build_value("99999999999999999999")
    assert not isinstance(v, VInt)
    assert v == VFloat(1e20, "99999999999999999999")


def test_hex_overflow_falls_through_to_text():
    assert build_value("0xFFFFFFFFFFFFFFFF") == VText("0xFFFFFFFFFFFFFFFF")


@pytest.mark.parametrize("text", ["True", "tRuE", "False", "yes"])
def test_bool_is_case_sensitive(text):
    assert build_value(text) == VText(text)


def test_padded_number_is_text():
    assert build_value(" 10") == VText(" 10")


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def test_array_of_text():
    assert build_value("a:b:c") == VArray((VText("a"), VText("b"), VText("c")), "a:b:c")


def test_array_items_are_inferred():
    v = build_value("a: 1 : 2.5:t")
    assert v == VArray(
        (VText("a"), VInt(1, "1"), VFloat(2.5, "2.5"), VBool(True, "t")),
        "a: 1 : 2.5:t",
    )


def test_array_raw_is_untrimmed_original():
    v = build_value(" x : y ")
    assert isinstance(v, VArray)
    assert v.raw == " x : y "
    assert as_str(v) == " x : y "


def test_path_like_value():
    v = build_value("/usr/local/bin:/usr/bin:/bin")
    assert isinstance(v, VArray)
    assert [item.raw for item in v.items] == ["/usr/local/bin", "/usr/bin", "/bin"]


def test_hostname_port_is_array():
    assert build_value("localhost:8080") == VArray(
        (VText("localhost"), VInt(8080, "8080")), "localhost:8080"
    )


def test_socket_with_extra_segment_splits():
    v = build_value("127.0.0.1:8080:9090")
    assert v == VArray(
        (
            VIpAddr(IPv4Address("127.0.0.1"), "127.0.0.1"),
            VInt(8080, "8080"),
            VInt(9090, "9090"),
        ),
        "127.0.0.1:8080:9090",
    )


def test_mixed_base_array():
    v = build_value("0x1F:0b101")
    assert v == VArray((VInt(31, "0x1F"), VInt(5, "0b101")), "0x1F:0b101")


def test_single_segment_collapses():
    assert build_value("lonely:") == VText("lonely")
    assert build_value(":8080") == VInt(8080, "8080")


def test_empty_segments_are_dropped():
    v = build_value("a::b:")
    assert v == VArray((VText("a"), VText("b")), "a::b:")


def test_only_delimiter_is_text():
    assert build_value(":") == VText(":")
    assert build_value(" : : ") == VText(" : : ")


def test_split_array_without_delimiter():
    assert split_array("plain") is None


def test_split_array_without_segments():
    assert split_array(":  :") is None


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text",
    [
        "10", "-7", "0x1F", "0o17", "0b101", "3.14", ".5", "inf", "t", "FALSE",
        "127.0.0.1", "::1", "[::1]:443", "10.0.0.1:80", "a:b:c", "a: 1 :t",
        "lonely:", ":", "hello world", "True", "99999999999999999999",
    ],
)
def test_rebuilding_from_raw_is_stable(text):
    v = build_value(text)
    assert build_value(as_str(v)) == v


# ---------------------------------------------------------------------------
# Long inputs
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text",
    [
        "9" * 5000,
        "-" + "1" * 5000,
        "0x" + "F" * 5000,
        "0o" + "7" * 5000,
        "0b" + "1" * 5000,
        "1." + "5" * 5000,
        "1e" + "9" * 5000,
        "a" * 5000,
        "1.2.3.4:" + "9" * 5000,
        "[::1]:" + "9" * 5000,
        "10.0.0.1:" + "1" * 4301,
        ":".join(["1"] * 5000),
        ":".join(["x" * 10] * 1000),
    ],
)
def test_long_input_never_raises(text):
    v = build_value(text)
    assert as_str(v) == text


def test_huge_port_splits_instead_of_failing():
    text = "1.2.3.4:" + "9" * 5000
    v = build_value(text)
    assert isinstance(v, VArray)
    assert v.items[0] == VIpAddr(IPv4Address("1.2.3.4"), "1.2.3.4")


def test_snapshot_with_huge_port_builds():
    snap = Snapshot.build({"X": "10.0.0.1:" + "1" * 4301})
    assert snap.get_str("X") == "10.0.0.1:" + "1" * 4301
    assert snap.get_socket("X") is None
