import math

import pytest

from m173.helper import (
    ArmorType,
    Dimension,
    DoubleVector3,
    FloatAngle,
    IntVector2,
    IntVector3,
    VsDamageInfo,
    stricmp,
    to_ucs2,
    to_utf8,
)


def test_int_vector2_distance_is_symmetric():
    a = IntVector2(3, -7)
    b = IntVector2(-2, 11)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))


def test_int_vector2_distance_to_self_is_zero():
    a = IntVector2(5, 9)
    assert a.distance_to(a) == 0.0


def test_int_vector2_equality_and_hash():
    assert IntVector2(1, 2) == IntVector2(1, 2)
    assert len({IntVector2(1, 2), IntVector2(1, 2), IntVector2(2, 1)}) == 2


def test_int_vector3_equality():
    assert IntVector3(1, 2, 3) == IntVector3(1, 2, 3)
    assert IntVector3(1, 2, 3) != IntVector3(3, 2, 1)


def test_double_vector_add_sub_round_trip():
    a = DoubleVector3(1.5, -2.0, 3.25)
    b = DoubleVector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_double_vector_scalar_mul():
    a = DoubleVector3(1.5, -2.0, 3.25)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_double_vector_componentwise_mul_identity():
    a = DoubleVector3(1.5, -2.0, 3.25)
    assert a * DoubleVector3(1.0, 1.0, 1.0) == a


def test_double_vector_default_is_origin():
    origin = DoubleVector3()
    a = DoubleVector3(4.0, 5.0, 6.0)
    assert a - a == origin


def test_distance_no_height_ignores_y():
    a = DoubleVector3(1.0, 5.0, 2.0)
    b = DoubleVector3(4.0, -70.0, 6.0)
    flat_b = DoubleVector3(b.x, a.y, b.z)
    assert a.distance_to_no_height(b) == pytest.approx(a.distance_to(flat_b))


def test_distance_matches_norm_of_difference():
    a = DoubleVector3(1.0, 2.0, 3.0)
    b = DoubleVector3(-4.0, 0.5, 9.0)
    d = a - b
    assert a.distance_to(b) == pytest.approx(math.sqrt(d.x**2 + d.y**2 + d.z**2))


def test_angle_bytes_are_signed_bytes():
    for deg in range(-720, 721, 15):
        angle = FloatAngle(deg, deg, deg)
        assert -128 <= angle.yaw_to_byte() <= 127
        assert angle.yaw_to_byte() == angle.pitch_to_byte() == angle.roll_to_byte()


def test_angle_zero_is_zero_byte():
    assert FloatAngle().yaw_to_byte() == 0


def test_vs_damage_info_defaults():
    info = VsDamageInfo()
    assert info.damage == 1
    assert info.knockback == pytest.approx(0.1)


def test_enums_values():
    assert Dimension(0) is Dimension.OVERWORLD
    assert Dimension(-1) is Dimension.NETHER
    assert [ArmorType(i) for i in range(4)] == list(ArmorType)


def test_stricmp():
    assert stricmp("HeLLo", "hello")
    assert not stricmp("hello", "hell")
    assert not stricmp("hello", "world")


@pytest.mark.parametrize("text", ["hello", "Привет мир", "\u00a7eGiven", "日本語", ""])
def test_utf8_round_trip(text):
    assert to_ucs2(to_utf8(text)) == text


def test_utf8_matches_standard_encoder_for_bmp():
    text = "caf\u00e9 \u20ac"
    assert to_utf8(text) == text.encode("utf-8")


def test_surrogate_becomes_question_mark():
    assert to_utf8("\ud800") == b"?"


def test_truncated_sequence_is_replaced():
    assert to_ucs2(b"a\xc3") == "a?"


def test_four_byte_sequence_not_representable():
    decoded = to_ucs2("\U0001F600".encode("utf-8"))
    assert set(decoded) == {"?"}