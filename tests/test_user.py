import pytest

from flagsdk.user import User


def test_key_required():
    with pytest.raises(ValueError):
        User(None)


def test_minimal_json_has_only_key():
    assert User("test-user").to_json() == {"key": "test-user"}


def test_anonymous_included_only_when_true():
    user = User("a")
    assert "anonymous" not in user.to_json()
    user.anonymous = True
    assert user.to_json()["anonymous"] is True


def test_unredacted_fields_use_wire_names():
    user = User("k", first_name="Ann", email="ann@example.com", country="NZ")
    result = user.to_json()
    assert result["firstName"] == "Ann"
    assert result["email"] == "ann@example.com"
    assert result["country"] == "NZ"
    assert "privateAttrs" not in result


def test_redact_user_private_attribute():
    user = User("k", name="Bob", email="bob@example.com")
    user.add_private_attribute("email")
    result = user.to_json(redact=True)
    assert "email" not in result
    assert result["name"] == "Bob"
    assert result["privateAttrs"] == ["email"]


def test_private_attribute_not_hidden_without_redact():
    user = User("k", email="bob@example.com")
    user.add_private_attribute("email")
    result = user.to_json(redact=False)
    assert result["email"] == "bob@example.com"
    assert "privateAttrs" not in result


def test_all_attributes_private_hides_everything_but_key():
    user = User("k", ip="1.2.3.4", name="Bob", custom={"team": "x"}, anonymous=True)
    result = user.to_json(redact=True, all_attributes_private=True)
    assert result["key"] == "k"
    assert result["anonymous"] is True
    assert result["custom"] == {}
    assert sorted(result["privateAttrs"]) == sorted(["ip", "name", "team"])


def test_global_private_names_redact_custom():
    user = User("k", custom={"team": "x", "level": 3})
    result = user.to_json(redact=True, global_private_attribute_names=["level"])
    assert result["custom"] == {"team": "x"}
    assert result["privateAttrs"] == ["level"]
    assert user.custom == {"team": "x", "level": 3}


def test_redaction_does_not_touch_non_object_custom():
    user = User("k", custom=[1, 2])
    assert user.to_json(redact=True, all_attributes_private=True)["custom"] == [1, 2]


def test_is_private_attribute_sources():
    user = User("k")
    user.add_private_attribute("ip")
    assert user.is_private_attribute("ip")
    assert not user.is_private_attribute("email")
    assert user.is_private_attribute("email", False, ["email"])
    assert user.is_private_attribute("anything", True, None)


def test_add_private_attribute_requires_name():
    with pytest.raises(ValueError):
        User("k").add_private_attribute(None)


def test_value_of_builtin_attributes():
    user = User("k", last_name="Smith", avatar="pic")
    assert user.value_of_attribute("key") == "k"
    assert user.value_of_attribute("lastName") == "Smith"
    assert user.value_of_attribute("avatar") == "pic"
    assert user.value_of_attribute("anonymous") is False
    assert user.value_of_attribute("email") is None


def test_value_of_custom_attribute_is_a_copy():
    user = User("k", custom={"groups": ["a", "b"]})
    value = user.value_of_attribute("groups")
    assert value == ["a", "b"]
    value.append("c")
    assert user.custom["groups"] == ["a", "b"]


def test_builtin_name_not_looked_up_in_custom():
    user = User("k", custom={"email": "x@example.com"})
    assert user.value_of_attribute("email") is None
    assert user.value_of_attribute("missing") is None