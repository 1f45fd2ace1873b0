"""
Example forms built on ObjectState.

- PersonForm: text, number, pattern and checkbox inputs with validators
- DataLoader: two fields populated asynchronously after a delay
"""

from .person_form import PersonForm, PersonFormKeys, native_validation_message
from .data_loader import DataLoader

__all__ = [
    "PersonForm",
    "PersonFormKeys",
    "native_validation_message",
    "DataLoader",
]
