# tests/test_convert.py
import io
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest
import har_convert.convert as convert_module
from har_convert import (
    Har,
    HarConvert,
    HarConvertError,
    HarIOError,
    InvalidArgumentError,
    MalformedInputError,
    deserialize,
    deserialize_from_file,
    deserialize_from_stream,
)

# --- Fixtures ---


@pytest.fixture(scope="module")
def redirects_har_path() -> Path:
    return Path(__file__).parent / "archives" / "redirects.har"


@pytest.fixture(scope="module")
def redirects_har(redirects_har_path: Path) -> Har:
    return HarConvert.deserialize_from_file(str(redirects_har_path))


# Fixture for creating a HAR file on the fly
@pytest.fixture(scope="function")
def dummy_har_file(tmp_path: Path):
    def _create_dummy(content: Any, encoding: str = "utf-8"):
        path = tmp_path / "dummy.har"
        if isinstance(content, str):
            path.write_text(content, encoding=encoding)
        else:
            path.write_text(json.dumps(content), encoding=encoding)
        return str(path)

    return _create_dummy


def single_entry_har(request_url: str, redirect_url: Any) -> str:
    response = {} if redirect_url is ... else {"redirectURL": redirect_url}
    return json.dumps(
        {"log": {"entries": [{"request": {"url": request_url}, "response": response}]}}
    )


# --- Scenarios ---


def test_partial_redirect_made_absolute():
    har = HarConvert.deserialize(
        '{"log":{"entries":[{"request":{"url":"https://example.com/a"},'
        '"response":{"redirectURL":"/b?x=1"}}]}}'
    )
    assert str(har.log.entries[0].response.redirect_url) == "https://example.com/b?x=1"


def test_absolute_redirect_unchanged():
    har = HarConvert.deserialize(
        single_entry_har("https://example.com/a", "https://other.com/c")
    )
    assert str(har.log.entries[0].response.redirect_url) == "https://other.com/c"


@pytest.mark.parametrize(
    "redirect",
    ["HTTPS://other.com/c", "https://other.com:443/c", "http://[::1]:80/c"],
)
def test_absolute_redirect_text_unchanged(redirect):
    har = HarConvert.deserialize(single_entry_har("https://example.com/a", redirect))
    assert har.log.entries[0].response.redirect_url == redirect


def test_empty_redirect_kept_as_empty():
    har = HarConvert.deserialize(single_entry_har("https://example.com/a", ""))
    redirect_url = har.log.entries[0].response.redirect_url
    assert redirect_url is not None
    assert str(redirect_url) == ""


def test_missing_and_null_redirects_stay_absent():
    har = HarConvert.deserialize(
        json.dumps(
            {
                "log": {
                    "entries": [
                        {"request": {"url": "https://example.com/a"}, "response": {}},
                        {
                            "request": {"url": "https://example.com/b"},
                            "response": {"redirectURL": None},
                        },
                    ]
                }
            }
        )
    )
    assert [e.response.redirect_url for e in har.log.entries] == [None, None]


def test_case_varied_field_names_parse_identically():
    canonical = HarConvert.deserialize(
        '{"log":{"entries":[{"request":{"url":"https://example.com/a"},'
        '"response":{"redirectURL":"/b?x=1"}}]}}'
    )
    varied = HarConvert.deserialize(
        '{"Log":{"ENTRIES":[{"Request":{"URL":"https://example.com/a"},'
        '"RESPONSE":{"redirectUrl":"/b?x=1"}}]}}'
    )
    assert varied == canonical


# --- Argument and input errors ---


@pytest.mark.parametrize("har_json", ["", "   ", "\n\t", None])
def test_deserialize_rejects_blank_input(har_json):
    with pytest.raises(InvalidArgumentError):
        HarConvert.deserialize(har_json)


def test_deserialize_invalid_json():
    with pytest.raises(MalformedInputError, match="Invalid JSON"):
        HarConvert.deserialize("{not json")


def test_invalid_json_error_keeps_parser_cause():
    with pytest.raises(MalformedInputError) as exc_info:
        HarConvert.deserialize("{not json")
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("har_json", ["[]", "42", '"log"', "null"])
def test_deserialize_root_not_object(har_json):
    with pytest.raises(MalformedInputError, match="Root is not an object"):
        HarConvert.deserialize(har_json)


def test_deserialize_missing_log():
    with pytest.raises(MalformedInputError, match="'log' object not found"):
        HarConvert.deserialize('{"some_other_key": "value"}')


def test_deserialize_missing_entries():
    with pytest.raises(MalformedInputError, match="'log.entries' not found"):
        HarConvert.deserialize('{"log": {"version": "1.2", "creator": {}}}')


def test_deserialize_entries_not_list():
    with pytest.raises(MalformedInputError, match=r"\$\.log\.entries"):
        HarConvert.deserialize('{"log": {"entries": {"key": "value"}}}')


def test_deserialize_missing_request_url_for_partial_redirect():
    with pytest.raises(MalformedInputError, match="no request.url"):
        HarConvert.deserialize(
            '{"log":{"entries":[{"request":{},"response":{"redirectURL":"/b"}}]}}'
        )


@pytest.mark.parametrize(
    "request_url, redirect",
    [
        ("https://example.com/a", "//host:99999/x"),
        ("https://example.com:99999/a", "/b"),
    ],
)
def test_deserialize_invalid_port(request_url, redirect):
    with pytest.raises(MalformedInputError, match=r"Invalid (response\.redirectURL|request\.url) in entry 0"):
        HarConvert.deserialize(single_entry_har(request_url, redirect))


def test_errors_share_base_class():
    assert issubclass(InvalidArgumentError, HarConvertError)
    assert issubclass(MalformedInputError, ValueError)
    assert issubclass(HarIOError, OSError)


def test_deserialize_accepts_bytes_with_bom():
    content = "\ufeff" + single_entry_har("https://example.com/a", "/b")
    har = HarConvert.deserialize(content.encode("utf-8"))
    assert str(har.log.entries[0].response.redirect_url) == "https://example.com/b"


def test_deserialize_rejects_blank_bytes():
    with pytest.raises(InvalidArgumentError):
        HarConvert.deserialize(b"  ")


def test_module_level_aliases():
    assert deserialize is HarConvert.deserialize
    assert deserialize_from_file is HarConvert.deserialize_from_file
    assert deserialize_from_stream is HarConvert.deserialize_from_stream


# --- File based deserialization ---


def test_from_file_entries_in_recording_order(redirects_har: Har):
    requests = [str(e.request.url) for e in redirects_har.log.entries]
    assert requests == [
        "https://shop.example.com/cart",
        "https://shop.example.com/login?next=%2Fcart",
        "http://localhost:8080/session",
        "http://localhost:8080/old",
    ]


def test_from_file_redirects_normalized(redirects_har: Har):
    redirects = [
        None if e.response.redirect_url is None else str(e.response.redirect_url)
        for e in redirects_har.log.entries
    ]
    assert redirects == [
        "https://shop.example.com/login?next=%2Fcart",
        "",
        "https://accounts.example.org/welcome",
        "http://localhost:8080/new/place",
    ]


def test_from_file_maps_nested_objects(redirects_har: Har):
    log = redirects_har.log
    assert log.version == "1.2"
    assert log.creator.name == "WebInspector"
    assert log.pages[0].page_timings.on_load == pytest.approx(980.1)

    first = log.entries[0]
    assert first.pageref == "page_1"
    assert first.started_date_time == datetime(
        2024, 5, 15, 12, 0, 0, 123000, tzinfo=timezone.utc
    )
    assert first.response.status == 302
    assert first.response.headers[0].name == "Location"
    assert first.timings.dns == -1
    assert first.custom_fields == {"_id": "1"}

    post = log.entries[2]
    assert post.request.method == "POST"
    assert post.request.post_data.params[0].value == "alice"
    assert post.response.cookies[0].http_only is True
    assert post.response.cookies[0].secure is False


def test_from_file_accepts_path_object(redirects_har_path: Path, redirects_har: Har):
    assert HarConvert.deserialize_from_file(redirects_har_path) == redirects_har


def test_from_file_not_found():
    with pytest.raises(HarIOError, match="Could not open HAR file"):
        HarConvert.deserialize_from_file("non_existent_file.har")


def test_from_file_directory(tmp_path: Path):
    with pytest.raises(HarIOError):
        HarConvert.deserialize_from_file(tmp_path)


def test_from_file_none():
    with pytest.raises(InvalidArgumentError):
        HarConvert.deserialize_from_file(None)


def test_from_file_invalid_json(dummy_har_file):
    with pytest.raises(MalformedInputError, match="Invalid JSON"):
        HarConvert.deserialize_from_file(dummy_har_file("{invalid structure}"))


def test_from_file_with_utf8_bom(dummy_har_file):
    path = dummy_har_file(
        {"log": {"entries": [{"request": {"url": "https://example.com/a"}, "response": {"redirectURL": "/z"}}]}},
        encoding="utf-8-sig",
    )
    har = HarConvert.deserialize_from_file(path)
    assert str(har.log.entries[0].response.redirect_url) == "https://example.com/z"


def test_from_file_closes_file_on_failure(dummy_har_file, monkeypatch):
    opened = []

    def tracking_open(*args, **kwargs):
        f = open(*args, **kwargs)
        opened.append(f)
        return f

    monkeypatch.setattr(convert_module, "open", tracking_open, raising=False)
    path = dummy_har_file("{invalid structure}")

    with pytest.raises(MalformedInputError):
        HarConvert.deserialize_from_file(path)

    assert len(opened) == 1
    assert opened[0].closed


def test_from_file_closes_file_on_success(dummy_har_file, monkeypatch):
    opened = []

    def tracking_open(*args, **kwargs):
        f = open(*args, **kwargs)
        opened.append(f)
        return f

    monkeypatch.setattr(convert_module, "open", tracking_open, raising=False)
    HarConvert.deserialize_from_file(
        dummy_har_file(single_entry_har("https://example.com/a", ...))
    )

    assert opened[0].closed


# --- Stream based deserialization ---


def test_from_text_stream():
    stream = io.StringIO(single_entry_har("https://example.com/a", "/b"))
    har = HarConvert.deserialize_from_stream(stream)
    assert har.log.entries[0].response.redirect_url == "https://example.com/b"


def test_from_binary_stream_left_open():
    stream = io.BytesIO(single_entry_har("https://example.com/a", "/b").encode())
    HarConvert.deserialize_from_stream(stream)
    assert not stream.closed


def test_from_stream_none():
    with pytest.raises(InvalidArgumentError):
        HarConvert.deserialize_from_stream(None)


def test_from_stream_invalid_utf8():
    with pytest.raises(MalformedInputError):
        HarConvert.deserialize_from_stream(io.BytesIO(b'{"log": "\xff\xfe\xfa"}'))


def test_from_stream_read_failure():
    class BrokenStream:
        def read(self, *args):
            raise OSError("device not ready")

    with pytest.raises(HarIOError, match="device not ready"):
        HarConvert.deserialize_from_stream(BrokenStream())


def test_started_date_time_offsets_preserved():
    har = HarConvert.deserialize(
        json.dumps(
            {
                "log": {
                    "entries": [
                        {
                            "startedDateTime": "2024-05-15T14:00:00.500+02:00",
                            "request": {"url": "https://example.com/"},
                            "response": {},
                        }
                    ]
                }
            }
        )
    )
    started = har.log.entries[0].started_date_time
    assert started.utcoffset() == timedelta(hours=2)
