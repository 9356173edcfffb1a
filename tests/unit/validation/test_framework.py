"""Tests for the validation engine."""

import pytest

from fieldcheck.errors import UnknownRuleError
from fieldcheck.validation import Phase, Validator
from fieldcheck.values import FileUpload, UploadError


class Accounts:
    """Stand-in for a model with a custom check."""

    def __init__(self, names):
        self.names = names

    def is_unique(self, value, table="users"):
        return value not in self.names


@pytest.fixture
def validator():
    return Validator()


class TestValidate:
    """Test the per-field evaluation order."""

    def test_valid_record(self, validator):
        validator.add("email", ["required", "email"]).add("name", "not_empty")

        assert validator.validate({"email": "jim@originphp.com", "name": "Jim"}) == {}

    def test_fields_without_rules_are_ignored(self, validator):
        validator.add("name", "not_empty")

        assert validator.validate({"name": "Jim", "notes": None, "age": "abc"}) == {}

    def test_fields_without_failures_are_omitted(self, validator):
        validator.add("name", "not_empty").add("email", "email")

        assert validator.validate({"name": "Jim", "email": "nope"}) == {"email": ["Invalid email address"]}

    def test_multiple_failures_in_rule_order(self, validator):
        validator.add("address", ["email", "ip"])

        assert validator.validate({"address": "1-2-3"}) == {
            "address": ["Invalid email address", "Invalid IP address"]
        }

    def test_custom_messages(self, validator):
        validator.add("status", "valid", rule=("in", ["draft", "published"]), message="Unknown status")

        assert validator.validate({"status": "deleted"}) == {"status": ["Unknown status"]}

    def test_absent_field_reaches_primitive(self, validator):
        validator.add("name", "not_empty")

        assert validator.validate({}) == {"name": ["This field cannot be empty"]}


class TestRequired:
    """Test the required rule."""

    @pytest.mark.parametrize("data", [{}, {"email": None}, {"email": ""}, {"email": "  "}, {"email": []}])
    def test_missing_or_empty_stops(self, validator, data):
        validator.add("email", ["required", "email"])

        assert validator.validate(data) == {"email": ["This field is required"]}

    def test_required_then_rules(self, validator):
        validator.add("email", ["required", "email"])

        assert validator.validate({"email": "foo"}) == {"email": ["Invalid email address"]}

    def test_required_custom_message(self, validator):
        validator.add("email", "required", message="Email please")

        assert validator.validate({}) == {"email": ["Email please"]}

    def test_upload_without_file(self, validator):
        validator.add("avatar", "required")
        avatar = FileUpload(name="", tmp_name=None, error=UploadError.NO_FILE)

        assert validator.validate({"avatar": avatar}) == {"avatar": ["This field is required"]}

    def test_zero_is_not_empty(self, validator):
        validator.add("count", ["required", "integer"])

        assert validator.validate({"count": 0}) == {}


class TestOptional:
    """Test the optional rule."""

    @pytest.mark.parametrize("data", [{}, {"website": None}, {"website": ""}])
    def test_missing_or_empty_skips_the_rest(self, validator, data):
        validator.add("website", ["optional", "url"])

        assert validator.validate(data) == {}

    def test_value_is_checked(self, validator):
        validator.add("website", ["optional", "url"])

        assert validator.validate({"website": "not a url"}) == {"website": ["Invalid URL"]}


class TestPresent:
    """Test presence checks."""

    def test_present_rule(self, validator):
        validator.add("terms", ["present", "accepted"])

        assert validator.validate({}) == {"terms": ["This field must be present"]}
        assert validator.validate({"terms": ""}) == {"terms": ["This must be accepted"]}
        assert validator.validate({"terms": "1"}) == {}

    def test_present_option(self, validator):
        validator.add("name", "not_blank", present=True)
        validator.add("name", "max", rule=("max_length", 3))

        assert validator.validate({}) == {
            "name": ["This field must be present", "Invalid value"]
        }
        assert validator.validate({"name": "Jim"}) == {}

    def test_present_option_with_stop_on_fail(self, validator):
        validator.add("name", "not_blank", present=True, stop_on_fail=True)
        validator.add("name", "max", rule=("max_length", 3))

        assert validator.validate({}) == {"name": ["This field must be present"]}

    def test_present_option_still_runs_rule(self, validator):
        validator.add("name", "not_blank", present=True)

        assert validator.validate({"name": "  "}) == {"name": ["This field cannot be blank"]}


class TestOptions:
    """Test allow_empty, stop_on_fail and phases."""

    def test_allow_empty(self, validator):
        validator.add("email", "email", allow_empty=True)

        assert validator.validate({}) == {}
        assert validator.validate({"email": ""}) == {}
        assert validator.validate({"email": "foo"}) == {"email": ["Invalid email address"]}

    def test_stop_on_fail(self, validator):
        validator.add("address", "email", stop_on_fail=True).add("address", "ip")

        assert validator.validate({"address": "1-2-3"}) == {"address": ["Invalid email address"]}

    def test_stop_on_fail_only_when_failing(self, validator):
        validator.add("address", "numeric", stop_on_fail=True).add("address", "ip")

        assert validator.validate({"address": "123"}) == {"address": ["Invalid IP address"]}

    def test_phase_filtering(self, validator):
        validator.add("password", "required", on="create")
        validator.add("id", "required", on=Phase.UPDATE)

        assert validator.validate({}) == {"password": ["This field is required"]}
        assert validator.validate({}, Phase.UPDATE) == {"id": ["This field is required"]}
        assert validator.validate({}, "update") == {"id": ["This field is required"]}

    def test_invalid_phase_raises(self, validator):
        with pytest.raises(ValueError):
            validator.validate({}, "delete")


class TestRuleShapes:
    """Test the non-primitive rule forms."""

    def test_confirm(self, validator):
        validator.add("password", "confirm")

        assert validator.validate({"password": "secret", "password_confirm": "secret"}) == {}
        assert validator.validate({"password": "secret", "password_confirm": "other"}) == {
            "password": ["The confirmed value does not match"]
        }
        assert validator.validate({"password": "secret"}) == {
            "password": ["The confirmed value does not match"]
        }

    def test_bound_call(self, validator):
        accounts = Accounts({"jim", "amanda"})
        validator.add("username", "unique", rule=(accounts, "is_unique", "users"), message="Already taken")

        assert validator.validate({"username": "tony"}) == {}
        assert validator.validate({"username": "jim"}) == {"username": ["Already taken"]}

    def test_predicate(self, validator):
        validator.add("age", "adult", rule=lambda value: value >= 18, message="Too young")

        assert validator.validate({"age": 21}) == {}
        assert validator.validate({"age": 12}) == {"age": ["Too young"]}

    def test_unknown_rule_raises(self, validator):
        validator.add("name", "fooRule")

        with pytest.raises(UnknownRuleError):
            validator.validate({"name": "foo"})

    def test_missing_method_raises_on_validate(self, validator):
        validator.add("username", "unique", rule=(Accounts(set()), "is_unqiue"))

        with pytest.raises(UnknownRuleError, match="is_unqiue"):
            validator.validate({"username": "jim"})


class TestRegistryDelegation:
    """Test add, remove and rules on the validator."""

    def test_remove(self, validator):
        validator.add("email", ["required", "email"]).remove("email", "required")

        assert validator.validate({}) == {"email": ["Invalid email address"]}
        validator.remove("email")
        assert validator.validate({}) == {}
        assert validator.rules() == {}

    def test_rules(self, validator):
        validator.add("email", ["required", "email"])

        assert list(validator.rules("email")) == ["required", "email"]
        assert list(validator.rules()) == ["email"]
