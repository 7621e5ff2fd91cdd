import pytest

import termintent.keybindings as kb_module


@pytest.fixture(autouse=True)
def reset_command_keybindings():
    """Keep the process-wide keybindings manager from leaking between tests."""
    kb_module._global_command_keybindings = None
    yield
    kb_module._global_command_keybindings = None
