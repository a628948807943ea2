import pytest

from prefab_metadata.errors import UnknownFieldError
from prefab_metadata.loader import (
    DESCRIPTOR_FILENAME,
    load_package_metadata,
    scan_package_metadata,
)


def test_load_from_file(write_descriptor):
    path = write_descriptor("foo", '{"schema_version":1,"name":"foo","dependencies":["bar"]}')
    meta = load_package_metadata(path)
    assert meta.name == "foo"
    assert meta.dependencies == ("bar",)


def test_load_from_package_directory(write_descriptor):
    path = write_descriptor("foo", '{"schema_version":1,"name":"foo","dependencies":[]}')
    assert path.name == DESCRIPTOR_FILENAME
    meta = load_package_metadata(path.parent)
    assert meta.name == "foo"


def test_load_propagates_decode_errors(write_descriptor):
    path = write_descriptor("foo", '{"schema_version":1,"name":"foo","dependencies":[],"bar":"baz"}')
    with pytest.raises(UnknownFieldError):
        load_package_metadata(path)


def test_load_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_package_metadata(tmp_path / "nope.json")


def test_scan_skips_malformed_descriptors(write_descriptor):
    good = write_descriptor("good", '{"schema_version":1,"name":"good","dependencies":[]}')
    bad = write_descriptor("bad", '{"schema_version":1,"name":"bad","dependencies":["x",2]}')
    other = write_descriptor("other", '{"schema_version":1,"name":"other","dependencies":["good"]}')

    results = scan_package_metadata([good, bad.parent, other])
    assert [p for p, _ in results] == [good, bad, other]
    assert [r.ok for _, r in results] == [True, False, True]
    assert results[2][1].metadata.dependencies == ("good",)


def test_scan_continues_past_oversized_number(write_descriptor):
    bad = write_descriptor("bad", '{"schema_version":%s,"name":"bad","dependencies":[]}' % ("9" * 5000))
    good = write_descriptor("good", '{"schema_version":1,"name":"good","dependencies":[]}')

    results = scan_package_metadata([bad, good])
    assert [r.ok for _, r in results] == [False, True]
    assert results[1][1].metadata.name == "good"
