from cachelex import HeaderList, Vary


def test_append_keeps_order_and_duplicates():
    headers = HeaderList()
    headers.append("Content-Length", "42")
    headers.append("Content-Type", "text/plain")
    headers.append("content-length", "42")

    assert list(headers) == [
        ("Content-Length", "42"),
        ("Content-Type", "text/plain"),
        ("content-length", "42"),
    ]
    assert len(headers) == 3


def test_get_all_is_case_insensitive():
    headers = HeaderList([("Cache-Control", "no-cache"), ("X-Other", "1"), ("CACHE-CONTROL", "max-age=4")])

    assert list(headers.get_all("cache-control")) == ["no-cache", "max-age=4"]
    assert list(headers.get_all("missing")) == []


def test_get_all_is_restartable_and_lazy():
    headers = HeaderList([("Vary", "Accept")])
    values = headers.get_all("vary")

    assert list(values) == ["Accept"]
    assert list(values) == ["Accept"]

    headers.append("VARY", "Origin")
    assert list(values) == ["Accept", "Origin"]


def test_get_all_ignores_non_ascii_case_folding():
    headers = HeaderList([("\u212a", "kelvin sign")])

    # U+212A KELVIN SIGN lowercases to "k" with str.lower
    assert list(headers.get_all("k")) == []


def test_get_combines_values():
    headers = HeaderList([("Accept", "text/html"), ("accept", "application/json")])

    assert headers.get("ACCEPT") == "text/html, application/json"
    assert headers.get("Missing") is None


def test_contains():
    headers = HeaderList([("ETag", '"abc"')])

    assert "etag" in headers
    assert "Date" not in headers
    assert 1 not in headers


def test_from_raw():
    headers = HeaderList.from_raw([(b"Content-Length", b"42"), ("X-Name", "caf\xe9"), (b"X-Latin", b"caf\xe9")])

    assert list(headers) == [("Content-Length", "42"), ("X-Name", "café"), ("X-Latin", "café")]


def test_equality_and_repr():
    headers = HeaderList([("Age", "1")])

    assert headers == HeaderList([("Age", "1")])
    assert headers != HeaderList([("age", "1")])
    assert repr(headers) == "HeaderList([('Age', '1')])"


def test_cache_control_reads_every_field_line():
    headers = HeaderList([("Cache-Control", "public"), ("cache-control", "max-age=60, max-age=10")])

    cc = headers.cache_control()
    assert cc.public is True
    assert cc.max_age == 60


def test_vary_from_headers():
    headers = HeaderList([("Vary", "Accept, Accept-Encoding"), ("vary", "Origin"), ("Vary", " , bad name")])

    assert Vary.from_headers(headers).values == ["Accept", "Accept-Encoding", "Origin"]


def test_vary_star():
    assert Vary.from_value("*").values == ["*"]
