"""
Password strength enforcement core.

Framework-free: rules, form classification, field location, the live
validation controller and the bootstrap/DOM watch loop, all operating on
``enforcer.dom.Document``.
"""
from .config import ClientConfig, document_config_provider
from .controller import ControllerState, ValidationController
from .dom import Document
from .locator import FieldLocator, FieldSet, locate
from .rules import SPECIAL_CHARACTERS, Thresholds, ValidationResult, check_strength, evaluate
from .watch import FormWatcher

__all__ = [
    'ClientConfig', 'ControllerState', 'Document', 'FieldLocator', 'FieldSet',
    'FormWatcher', 'SPECIAL_CHARACTERS', 'Thresholds', 'ValidationController',
    'ValidationResult', 'check_strength', 'document_config_provider',
    'evaluate', 'locate',
]
