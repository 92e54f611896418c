"""HELPERKIT test suite.

Folder taxonomy
- unit/      : Isolated checks of a single helper module (filesystem only via tmp_path).
- contract/  : Behavior every ResponseSink adapter must share.

Property-based tests live next to the unit tests they extend and carry
@pytest.mark.property.
"""
