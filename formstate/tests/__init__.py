"""
Test suite for the form state manager.

Focus areas:
- Reducer purity and schema closure
- Pristine phase and activation policies
- Update dispatch (keyed and event forms) and coercion
- Demo forms and CLI
"""
