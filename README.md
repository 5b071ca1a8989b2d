# flagsdk

Building blocks for a feature flag client:

- `flagsdk.user.User` describes the user whom flags are evaluated for.
- `flagsdk.config.Config` holds the settings that a client starts with.

## Installation

```
pip install flagsdk
```

## Users

`User` is a dataclass. `key` is required. `None` raises `ValueError`. The
optional fields are `anonymous`, `secondary`, `ip`, `first_name`, `last_name`,
`email`, `name`, `avatar`, `country`, `custom` (usually a dict of custom
attributes) and `private_attribute_names`.

```python
from flagsdk.user import User

user = User("user-key")
user.email = "someone@example.com"
user.custom = {"plan": "pro", "team": "blue"}
user.add_private_attribute("email")

user.value_of_attribute("plan")       # "pro"
user.value_of_attribute("anonymous")  # False
user.value_of_attribute("missing")    # None

# Serialize the user for an event and hide its private attributes.
user.to_json(True, False, ["team"])
# {"key": "user-key", "custom": {"plan": "pro"},
#  "privateAttrs": ["email", "team"]}
```

`to_json(redact, all_attributes_private, global_private_attribute_names)`
returns a JSON-ready dict. It uses wire names such as `firstName` and
`lastName`. It includes `anonymous` only when that flag is true. When
`redact` is true, it leaves out each private attribute, built-in or custom.
It lists the names it left out under `privateAttrs`.

`is_private_attribute` tells whether an attribute would be redacted. It
takes into account the "all attributes private" switch, a global list of
names, and the user's own private attribute names.

`value_of_attribute` looks up an attribute by its wire name. For a custom
attribute it returns a copy.

## Configuration

`Config` takes the mobile key, plus keyword arguments for each setting. Each
setting is also a plain attribute that you can change afterwards.

```python
from flagsdk.config import Config

config = Config("placeholder", offline=True)
config.polling_interval_millis = 50_000
config.add_secondary_mobile_key("secondary", "secret")
config.set_private_attributes(["name", "email"])
```

The settings are:

- `all_attributes_private`
- `background_polling_interval_millis`
- `app_uri`
- `connection_timeout_millis`
- `disable_background_updating`
- `events_capacity`
- `events_flush_interval_millis`
- `events_uri`
- `offline`
- `streaming`
- `polling_interval_millis`
- `stream_uri`
- `proxy_uri`
- `verify_peer`
- `use_report`
- `use_reasons`
- `cert_file`
- `inline_users_in_events`
- `auto_alias_opt_out`
- `request_timeout_millis`

Some values are checked or adjusted:

- A `mobile_key` of `None` raises `ValueError`.
- A polling interval below its minimum is raised to that minimum. The minimum
  is 30 seconds in the foreground and 15 minutes in the background.
- `add_secondary_mobile_key` raises `ValueError` when the name is `"default"`,
  when the name or key is already in use, or when either one is `None`.
- `set_private_attributes` raises `TypeError` when any name is not a string.

## What this package does not do

This package contains no client:

- no flag store or flag evaluation
- no analytics events
- no streaming or polling connection
- no network access of any kind

`User` and `Config` only describe a user and hold settings. They leave the use
of those values to the code built around them.

## Running the tests

```
pip install -e .[test]
pytest
```