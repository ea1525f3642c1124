"""Tests for the internal user entity."""

import dataclasses

import pytest

from external_auth.core.entities import InternalUser


class TestInternalUser:
    """Test cases for InternalUser entity."""
    
    def test_user_creation(self, sample_user):
        """Test user creation with valid data."""
        assert sample_user.username == "bob"
        assert sample_user.firstname == "Bob"
        assert sample_user.lastname == "Smith"
        assert sample_user.email == "bob@example.com"
        assert sample_user.roles == frozenset({"admin", "user"})
        assert sample_user.logout_url is None
    
    def test_defaults(self):
        """Test optional fields default to empty values."""
        user = InternalUser(username="bob", firstname="Bob", lastname="Smith")
        
        assert user.email is None
        assert user.groups == frozenset()
        assert user.roles == frozenset()
    
    def test_collections_are_frozen(self):
        """Test groups and roles are converted to frozensets."""
        user = InternalUser(
            username="bob", firstname="Bob", lastname="Smith",
            groups=["a", "b", "a"], roles=("admin",),
        )
        
        assert user.groups == frozenset({"a", "b"})
        assert isinstance(user.roles, frozenset)
    
    def test_none_collections_become_empty(self):
        """Test None groups/roles are treated as empty."""
        user = InternalUser(username="bob", firstname="Bob", lastname="Smith", groups=None, roles=None)
        
        assert user.groups == frozenset()
        assert user.roles == frozenset()
    
    def test_string_roles_rejected(self):
        """Test a bare string is not silently split into characters."""
        with pytest.raises(TypeError):
            InternalUser(username="bob", firstname="Bob", lastname="Smith", roles="admin")
    
    @pytest.mark.parametrize("field_name", ["username", "firstname", "lastname"])
    def test_empty_required_field_rejected(self, field_name):
        """Test required fields cannot be empty."""
        values = {"username": "bob", "firstname": "Bob", "lastname": "Smith"}
        values[field_name] = "  "
        
        with pytest.raises(ValueError, match=field_name):
            InternalUser(**values)
    
    def test_non_string_required_field_rejected(self):
        """Test required fields must be strings."""
        with pytest.raises(TypeError):
            InternalUser(username=None, firstname="Bob", lastname="Smith")
    
    def test_immutable(self, sample_user):
        """Test user cannot be modified after creation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_user.username = "mallory"
    
    def test_display_name(self, sample_user):
        """Test display name joins first and last name."""
        assert sample_user.display_name == "Bob Smith"
        assert sample_user.name == "Bob Smith"
    
    def test_role_and_group_checks(self, sample_user):
        """Test role and group membership helpers."""
        assert sample_user.has_role("admin")
        assert not sample_user.has_role("auditor")
        assert sample_user.in_group("staff")
        assert not sample_user.in_group("contractors")
    
    def test_equality_is_by_value(self, sample_user):
        """Test two users with the same fields are equal."""
        copy = InternalUser(
            username="bob", firstname="Bob", lastname="Smith", email="bob@example.com",
            groups={"staff"}, roles={"user", "admin"},
        )
        
        assert copy == sample_user
        assert hash(copy) == hash(sample_user)
    
    def test_dict_round_trip(self, sample_user):
        """Test conversion to and from dictionary."""
        data = sample_user.to_dict()
        
        assert data["roles"] == ["admin", "user"]
        assert data["display_name"] == "Bob Smith"
        assert InternalUser.from_dict(data) == sample_user
    
    def test_str(self, sample_user):
        """Test string representation shows only the username."""
        assert str(sample_user) == "InternalUser(bob)"
    
    @pytest.mark.parametrize("field_name", ["groups", "roles"])
    def test_from_dict_rejects_string_collection(self, sample_user, field_name):
        """Test a bare string collection in a dictionary is refused, not split."""
        data = sample_user.to_dict()
        data[field_name] = "staff"
        
        with pytest.raises(TypeError):
            InternalUser.from_dict(data)
    
    def test_from_dict_missing_collections(self):
        """Test absent groups and roles load as empty."""
        user = InternalUser.from_dict({"username": "bob", "firstname": "Bob", "lastname": "Smith"})
        
        assert user.groups == frozenset()
        assert user.roles == frozenset()
