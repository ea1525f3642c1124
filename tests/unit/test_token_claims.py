"""Tests for the token claims value object."""

import pytest

from external_auth.core.value_objects import TokenClaims


class TestTokenClaims:
    """Test cases for TokenClaims value object."""
    
    def test_role_union(self):
        """Test flat, realm and client roles are merged."""
        claims = TokenClaims({
            "roles": ["a"],
            "realm_access": {"roles": ["b"]},
            "resource_access": {"c1": {"roles": ["c"]}, "c2": {"roles": ["a"]}},
        })
        
        assert claims.all_roles == {"a", "b", "c"}
        assert claims.client_roles == {"c1": ["c"], "c2": ["a"]}
    
    def test_missing_role_claims_are_empty(self):
        """Test absent role claims yield no roles."""
        claims = TokenClaims({"sub": "x"})
        
        assert claims.flat_roles == []
        assert claims.realm_roles == []
        assert claims.client_roles == {}
        assert claims.all_roles == set()
    
    @pytest.mark.parametrize("raw_claims", [
        {"roles": None},
        {"roles": "admin"},
        {"realm_access": None},
        {"realm_access": {"roles": None}},
        {"realm_access": "admin"},
        {"resource_access": {"client": None}},
        {"resource_access": {"client": {"roles": 5}}},
        {"resource_access": ["client"]},
    ])
    def test_malformed_role_claims_are_ignored(self, raw_claims):
        """Test wrongly shaped role claims never raise."""
        assert TokenClaims(raw_claims).all_roles == set()
    
    def test_non_string_roles_filtered(self):
        """Test non-string list items are dropped."""
        claims = TokenClaims({"roles": ["a", 1, None, "", "b"]})
        
        assert claims.flat_roles == ["a", "b"]
    
    def test_get_string(self):
        """Test string claim accessor."""
        claims = TokenClaims({"email": "a@b.c", "blank": " ", "number": 3})
        
        assert claims.get_string("email") == "a@b.c"
        assert claims.get_string("blank") is None
        assert claims.get_string("number") is None
        assert claims.get_string("missing") is None
    
    def test_standard_claims(self):
        """Test issuer and subject accessors."""
        claims = TokenClaims({"iss": "https://idp", "sub": "123"})
        
        assert claims.issuer == "https://idp"
        assert claims.subject == "123"
        assert claims.has_claim("iss")
        assert not claims.has_claim("aud")
        assert claims.get_claim("aud", "default") == "default"
    
    def test_non_dict_rejected(self):
        """Test claims must be a dictionary."""
        with pytest.raises(TypeError):
            TokenClaims(["iss"])
