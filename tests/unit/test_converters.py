"""Tests for principal converters and listeners."""

import logging

from external_auth.application import (
    CallablePrincipalConverter,
    IdentityPrincipalConverter,
    LoggingEventListener,
)
from external_auth.core.entities import InternalUser
from external_auth.core.exceptions import AuthenticationDeniedError, AuthenticationError
from external_auth.core.protocols import (
    AbstractAuthenticationEventListener,
    AuthenticationEventListener,
    PrincipalConverter,
)


class AppPrincipal:
    """Principal type of an embedding application."""
    
    def __init__(self, user):
        self.user = user
    
    @property
    def name(self):
        return self.user.username


class TestIdentityPrincipalConverter:
    """Test cases for IdentityPrincipalConverter."""
    
    def test_round_trip(self, sample_user):
        """Test the user is its own principal."""
        converter = IdentityPrincipalConverter()
        
        assert converter.to_internal_user(converter.to_principal(sample_user)) == sample_user
    
    def test_foreign_principal(self):
        """Test foreign principals are not convertible."""
        assert IdentityPrincipalConverter().to_internal_user(object()) is None
    
    def test_satisfies_protocol(self):
        """Test the converter matches the converter protocol."""
        assert isinstance(IdentityPrincipalConverter(), PrincipalConverter)


class TestCallablePrincipalConverter:
    """Test cases for CallablePrincipalConverter."""
    
    def test_round_trip(self, sample_user):
        """Test conversion there and back preserves the user."""
        converter = CallablePrincipalConverter(AppPrincipal, lambda principal: principal.user)
        
        principal = converter.to_principal(sample_user)
        
        assert principal.name == "bob"
        assert converter.to_internal_user(principal) == sample_user
    
    def test_without_reverse_function(self, sample_user):
        """Test principals are foreign without a reverse function."""
        converter = CallablePrincipalConverter(AppPrincipal)
        
        assert converter.to_internal_user(converter.to_principal(sample_user)) is None
    
    def test_reverse_failure_is_foreign(self):
        """Test a failing reverse function yields None."""
        converter = CallablePrincipalConverter(AppPrincipal, lambda principal: principal.user)
        
        assert converter.to_internal_user("not a principal") is None


class TestLoggingEventListener:
    """Test cases for LoggingEventListener."""
    
    def test_logs_each_outcome(self, sample_user, caplog):
        """Test one audit record per outcome."""
        listener = LoggingEventListener()
        
        with caplog.at_level(logging.INFO, logger="external_auth.audit"):
            listener.on_success(sample_user)
            listener.on_denied(AuthenticationDeniedError("denied"))
            listener.on_error(AuthenticationError("backend down"))
        
        outcomes = [record.outcome for record in caplog.records if record.name == "external_auth.audit"]
        assert outcomes == ["success", "denied", "error"]
        assert caplog.records[-1].levelno == logging.WARNING
    
    def test_satisfies_protocol(self):
        """Test built-in listeners match the listener protocol."""
        assert isinstance(LoggingEventListener(), AuthenticationEventListener)
        assert isinstance(AbstractAuthenticationEventListener(), AuthenticationEventListener)
    
    def test_abstract_listener_ignores_events(self, sample_user):
        """Test the base listener accepts every event silently."""
        listener = AbstractAuthenticationEventListener()
        
        assert listener.on_success(sample_user) is None
        assert listener.on_denied(AuthenticationDeniedError("denied")) is None
        assert listener.on_error(AuthenticationError("error")) is None
