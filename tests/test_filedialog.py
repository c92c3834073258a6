import pytest

from netlayout.errors import CopasiError
from netlayout.filedialog import (
    SaveNameError,
    check_save_name,
    extend_filter,
    start_with,
)

WORK = "/home/model/work"


def test_start_with_none_is_working_directory():
    assert start_with(None, WORK) == WORK


def test_start_with_bare_name_goes_to_working_directory():
    assert start_with("model.cps", WORK) == WORK + "/model.cps"


def test_start_with_path_is_kept():
    assert start_with("/data/model.cps", WORK) == "/data/model.cps"


def test_extend_filter_adds_catch_all():
    assert extend_filter("COPASI Files (*.cps)") == (
        "COPASI Files (*.cps);;Any File (*)"
    )


def test_extend_filter_keeps_existing_catch_all():
    flt = "SBML (*.xml);;Any File (*)"
    assert extend_filter(flt) == flt


def test_extend_filter_is_idempotent():
    once = extend_filter("")
    assert extend_filter(once) == once


def test_specific_filter_accepts_anything():
    assert check_save_name("/tmp/out.123456", "CSV (*.csv)") == "/tmp/out.123456"


def test_catch_all_accepts_normal_extension():
    assert check_save_name("/tmp/out.txt", "Any File (*)") == "/tmp/out.txt"


def test_catch_all_accepts_no_extension():
    assert check_save_name("/tmp/out", "Any File (*)") == "/tmp/out"


def test_long_extension_is_rejected():
    with pytest.raises(SaveNameError, match="1 to 4 characters"):
        check_save_name("/tmp/out.abcdef", "Any File (*)")


def test_digit_extension_is_rejected():
    with pytest.raises(SaveNameError, match="cannot be digits"):
        check_save_name("/tmp/out.123", "Any File (*)")


def test_mixed_extension_is_accepted():
    assert check_save_name("/tmp/out.mp3", "Any File (*)") == "/tmp/out.mp3"


def test_save_name_error_is_copasi_error():
    with pytest.raises(CopasiError):
        check_save_name("report.99", "Any File (*)")