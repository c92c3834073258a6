import pytest

from netlayout.errors import CopasiError, UnresolvedReferenceError


def test_copasi_error_keeps_message():
    err = CopasiError("model could not be loaded")
    assert err.message == "model could not be loaded"
    assert str(err) == "model could not be loaded"


def test_copasi_error_can_be_raised_and_caught():
    err = CopasiError("bad input")
    assert err.message == "bad input"
    with pytest.raises(CopasiError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "bad input"


def test_unresolved_reference_keeps_id():
    err = UnresolvedReferenceError("glyph_7")
    assert err.reference_id == "glyph_7"
    assert "glyph_7" in str(err)


def test_unresolved_reference_is_caught_as_copasi_error():
    err = UnresolvedReferenceError("species_1")
    assert err.reference_id == "species_1"
    assert "species_1" in err.message
    with pytest.raises(CopasiError) as info:
        raise err
    assert info.value is err
    assert info.value.reference_id == "species_1"