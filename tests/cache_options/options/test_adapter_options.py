# test_adapter_options.py

import pytest

from cache_options import AdapterOptions, InvalidArgumentError
from cache_options.settings import AdapterSettings


def test_defaults():
    options = AdapterOptions()
    assert options.get_ttl() == 0
    assert options.get_namespace() == "cache_options"
    assert options.get_key_pattern() == ""
    assert options.get_readable() is True
    assert options.get_writable() is True


@pytest.mark.parametrize("key", ["namespace", "Namespace", "NAMESPACE"])
def test_key_normalization(key):
    assert AdapterOptions({key: "sessions"}).get_namespace() == "sessions"


def test_camel_and_dashed_keys():
    options = AdapterOptions({"keyPattern": r"^\w+$", "ttl": 5})
    assert options.get_key_pattern() == r"^\w+$"
    options.set_from_options([("key-pattern", "")])
    assert options.get_key_pattern() == ""


def test_unknown_option_raises():
    with pytest.raises(InvalidArgumentError, match="does not have a matching"):
        AdapterOptions({"memory_limit": "1G"})


def test_reserved_setter_is_not_an_option():
    with pytest.raises(InvalidArgumentError):
        AdapterOptions({"from_options": {}})


def test_unsupported_source_type_raises():
    with pytest.raises(InvalidArgumentError):
        AdapterOptions(42)
    with pytest.raises(InvalidArgumentError):
        AdapterOptions("ttl=5")


def test_pydantic_source_applies_only_set_fields():
    options = AdapterOptions({"namespace": "kept"})
    options.set_from_options(AdapterSettings(ttl=12.0))
    assert options.get_ttl() == 12
    assert options.get_namespace() == "kept"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CACHE_NAMESPACE", "from-env")
    monkeypatch.setenv("CACHE_WRITABLE", "false")
    options = AdapterOptions(AdapterSettings())
    assert options.get_namespace() == "from-env"
    assert options.get_writable() is False


@pytest.mark.parametrize("ttl, expected", [(10, 10), ("2.5", 2.5), (3.0, 3), ("0", 0)])
def test_ttl_normalization(ttl, expected):
    assert AdapterOptions().set_ttl(ttl).get_ttl() == expected


@pytest.mark.parametrize("ttl", [-1, "-0.5", "soon", None, True])
def test_invalid_ttl_raises(ttl):
    with pytest.raises(InvalidArgumentError):
        AdapterOptions().set_ttl(ttl)


def test_invalid_key_pattern_raises():
    with pytest.raises(InvalidArgumentError, match="Invalid key pattern"):
        AdapterOptions().set_key_pattern("([a-z")


def test_namespace_must_be_string():
    with pytest.raises(InvalidArgumentError):
        AdapterOptions().set_namespace(7)


def test_listeners_notified_on_change_only(events):
    options = AdapterOptions().add_listener(events)

    options.set_ttl(60).set_ttl("60").set_readable(False).set_namespace("cache_options")

    assert events.received == [("ttl", 60), ("readable", False)]


def test_remove_listener(events):
    options = AdapterOptions().add_listener(events)
    options.remove_listener(events).remove_listener(events)

    options.set_writable(False)

    assert events.received == []


def test_listeners_called_in_registration_order():
    calls = []
    options = AdapterOptions()
    options.add_listener(lambda name, value: calls.append("first"))
    options.add_listener(lambda name, value: calls.append("second"))

    options.set_namespace("ordered")

    assert calls == ["first", "second"]


@pytest.mark.parametrize("item", [("ttl", 5, "extra"), "ab", "ttl", 42, ("ttl",)])
def test_malformed_pairs_raise(item):
    with pytest.raises(InvalidArgumentError, match="key, value") as exc_info:
        AdapterOptions([item])

    assert exc_info.value.value == item
