import io

import pytest

from filerelay.models import FileRecord
from filerelay.service import FileService
from filerelay.storage import ConversionError, StorageError, StorageManager


class FakeConverter:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def convert_mp3_to_ogg(self, input_path):
        self.calls.append(input_path)
        if self.fail:
            raise ConversionError("erro ao converter arquivo: failed")
        output = input_path[: -len(".mp3")] + ".ogg"
        with open(output, "wb") as handle:
            handle.write(b"converted")
        return output


@pytest.fixture
def service(tmp_path):
    return FileService(StorageManager(tmp_path / "files"), FakeConverter())


def test_save_file_returns_record_with_name_ext_and_path(service):
    record = service.save_file("song.mp3", io.BytesIO(b"abc"))
    assert isinstance(record, FileRecord)
    assert record.name == "song"
    assert record.ext == "mp3"
    with open(record.path, "rb") as handle:
        assert handle.read() == b"abc"


def test_save_file_without_extension(service):
    record = service.save_file("README", io.BytesIO(b"x"))
    assert (record.name, record.ext) == ("README", "")
    assert record.path.endswith("_README")


def test_download_file_reads_content(service):
    record = service.save_file("a.txt", io.BytesIO(b"hello"))
    with service.download_file(record.path) as handle:
        assert handle.read() == b"hello"


def test_download_missing_file_raises(service, tmp_path):
    with pytest.raises(FileNotFoundError):
        service.download_file(str(tmp_path / "missing.bin"))


def test_delete_file_removes(service, tmp_path):
    record = service.save_file("a.txt", io.BytesIO(b"hello"))
    assert service.delete_file(record.path) is True
    with pytest.raises(FileNotFoundError):
        service.download_file(record.path)


def test_delete_missing_file_raises(service, tmp_path):
    with pytest.raises(StorageError):
        service.delete_file(str(tmp_path / "missing.bin"))


def test_convert_deletes_original_and_returns_new_path(service):
    record = service.save_file("track.mp3", io.BytesIO(b"mp3"))
    converted = service.convert_mp3_to_ogg(record.path)
    assert converted == record.path[: -len(".mp3")] + ".ogg"
    with open(converted, "rb") as handle:
        assert handle.read() == b"converted"
    with pytest.raises(FileNotFoundError):
        service.download_file(record.path)


def test_convert_failure_keeps_original(tmp_path):
    failing = FileService(StorageManager(tmp_path / "files"), FakeConverter(fail=True))
    record = failing.save_file("track.mp3", io.BytesIO(b"mp3"))
    with pytest.raises(ConversionError):
        failing.convert_mp3_to_ogg(record.path)
    with failing.download_file(record.path) as handle:
        assert handle.read() == b"mp3"