"""
Shared behaviour of the contract wrappers.
"""

from typing import Any, Dict

from ..artifacts.loader import get_abi, get_bytecode


class ContractWrapper:
    """
    Base wrapper holding a contract's ABI and bytecode.

    Subclasses set ``CONTRACT_NAME`` to the artifact they wrap.
    """

    CONTRACT_NAME = ""

    def __init__(self):
        self.abi = get_abi(self.CONTRACT_NAME)
        self.bytecode = get_bytecode(self.CONTRACT_NAME)

    def _find(self, item_type: str, name: str) -> Dict[str, Any]:
        for item in self.abi:
            if item.get('type') == item_type and item.get('name') == name:
                return item

        kind = "Function" if item_type == 'function' else "Event"
        raise ValueError(f"{kind} {name} not found in ABI")

    def prepare_transaction(
        self,
        function_name: str,
        *args,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Prepare a transaction for a specific function.

        Args:
            function_name: Name of the contract function
            *args: Function arguments
            **kwargs: Additional transaction parameters (e.g. ``from``)

        Returns:
            Prepared transaction dictionary
        """
        function_abi = self._find('function', function_name)

        expected = len(function_abi.get('inputs', []))
        if len(args) != expected:
            raise ValueError(
                f"Function {function_name} takes {expected} arguments, got {len(args)}"
            )

        return {
            "function": function_name,
            "args": args,
            "abi": function_abi,
            "transaction": dict(kwargs),
        }

    def decode_event(self, event_name: str, log_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Match decoded log arguments against an event's ABI.

        Args:
            event_name: Name of the event
            log_data: Event arguments keyed by ABI input name

        Returns:
            Dictionary with the event name, its arguments in ABI order and the ABI

        Raises:
            ValueError: If the event is unknown or an argument is missing
        """
        event_abi = self._find('event', event_name)

        names = [inp['name'] for inp in event_abi.get('inputs', [])]
        missing = [name for name in names if name not in log_data]
        if missing:
            raise ValueError(f"Event {event_name} missing arguments: {', '.join(missing)}")

        return {
            "event": event_name,
            "data": {name: log_data[name] for name in names},
            "abi": event_abi,
        }

    def get_deployment_data(self, **constructor_args) -> Dict[str, Any]:
        return {
            "bytecode": self.bytecode,
            "abi": self.abi,
            "constructor_args": constructor_args,
            "contract_name": self.CONTRACT_NAME,
        }
