
from typing import Dict, Any

from vcfview.browser.commands import CommandRegistry, Command


def register_bindings(registry: CommandRegistry, bindings: Dict[str, Dict[str, Any]]) -> Dict[str, str]:
    """Register each binding's command and return a key -> command name map.

    A binding's "key" may be a single key or a list of keys.
    """
    binding = {}

    for _, cmd_data in bindings.items():
        cmd_data = dict(cmd_data)
        keys = cmd_data.pop("key", "")
        cmd = Command(**cmd_data)
        registry.add(cmd)

        if isinstance(keys, str):
            keys = [keys]
        for key in keys:
            if key:
                binding[key] = cmd.name

    return binding


__all__ = ["register_bindings"]
