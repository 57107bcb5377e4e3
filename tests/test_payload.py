"""Tests for Payload assembly."""

import io
import stat
import tarfile

import pytest
from jinja2 import StrictUndefined, Template, UndefinedError

from nodekit.exceptions import PayloadError
from nodekit.runner import DEFAULT_MODE, Payload, PayloadFile


class TrackingReader(io.BytesIO):
    def __init__(self, data):
        super().__init__(data)
        self.was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


def test_writer_content_becomes_artifact() -> None:
    p = Payload()
    w = p.new_writer(PayloadFile(path="config.toml"))
    w.write(b"user = ")
    w.write(b'"sol"\n')

    assert p.read("config.toml") == b'user = "sol"\n'
    assert p.mode("config.toml") == DEFAULT_MODE


def test_add_reader_copies_and_closes_stream() -> None:
    p = Payload()
    reader = TrackingReader(b"#!/bin/bash\n")
    p.add_reader("steps.sh", reader, mode=0o755)

    assert reader.was_closed
    assert p.read("steps.sh") == b"#!/bin/bash\n"
    assert p.mode("steps.sh") == 0o755


def test_add_string_stores_exact_bytes() -> None:
    p = Payload()
    p.add_string("validator-keypair.json", "[1,2,3]", mode=0o600)

    assert p.read("validator-keypair.json") == "[1,2,3]".encode()


def test_add_template_renders_against_data() -> None:
    p = Payload()
    template = Template("hello {{ name }}", undefined=StrictUndefined)
    p.add_template("greeting.txt", template, {"name": "validator"})

    assert p.read("greeting.txt") == b"hello validator"


def test_add_template_failure_stores_nothing() -> None:
    p = Payload()
    template = Template("hello {{ missing }}", undefined=StrictUndefined)

    with pytest.raises(UndefinedError):
        p.add_template("greeting.txt", template, {})

    assert "greeting.txt" not in p


def test_same_path_last_writer_wins() -> None:
    p = Payload()
    p.add_string("a.txt", "first")
    p.add_string("b.txt", "other")
    p.add_string("a.txt", "second")

    assert p.read("a.txt") == b"second"
    assert p.paths() == ["a.txt", "b.txt"]
    assert len(p) == 2


@pytest.mark.parametrize("path", ["", ".", "./", "/etc/passwd", "../escape", "a/../../b"])
def test_invalid_paths_are_rejected(path) -> None:
    with pytest.raises(PayloadError):
        Payload().add_string(path, "x")


def test_membership_uses_normalized_paths() -> None:
    p = Payload()
    p.add_string("config.toml", "x")
    p.add_string("bin//steps.sh", "y")

    assert "config.toml" in p
    assert "./config.toml" in p
    assert "bin/steps.sh" in p
    assert p.read("./bin/steps.sh") == b"y"
    assert "../config.toml" not in p
    assert "" not in p
    assert "." not in p


def test_read_missing_artifact_raises() -> None:
    with pytest.raises(PayloadError):
        Payload().read("nope")


def test_write_to_materializes_files_with_modes(tmp_path) -> None:
    p = Payload()
    p.add_string("steps.sh", "#!/bin/bash\n", mode=0o755)
    p.add_string("keys/validator-keypair.json", "[1]", mode=0o600)

    written = p.write_to(tmp_path / "out")

    assert [w.relative_to(tmp_path / "out").as_posix() for w in written] == [
        "steps.sh",
        "keys/validator-keypair.json",
    ]
    assert (tmp_path / "out" / "steps.sh").read_text() == "#!/bin/bash\n"
    assert stat.S_IMODE((tmp_path / "out" / "steps.sh").stat().st_mode) == 0o755
    key = tmp_path / "out" / "keys" / "validator-keypair.json"
    assert stat.S_IMODE(key.stat().st_mode) == 0o600


def test_write_tar_is_deterministic_and_complete() -> None:
    def build():
        p = Payload()
        p.add_string("config.toml", 'user = "sol"\n')
        p.add_string("steps.sh", "#!/bin/bash\n", mode=0o755)
        buf = io.BytesIO()
        p.write_tar(buf)
        return buf.getvalue()

    first = build()
    assert first == build()

    with tarfile.open(fileobj=io.BytesIO(first), mode="r:gz") as tar:
        members = tar.getmembers()
        assert [m.name for m in members] == ["payload/config.toml", "payload/steps.sh"]
        assert members[1].mode == 0o755
        assert tar.extractfile(members[0]).read() == b'user = "sol"\n'
