from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Tuple


class AdminConfigServiceInterface(ABC):
    @abstractmethod
    def list_config(
        self,
        keys: Optional[Iterable[str]] = None,
        category: Optional[str] = None
    ) -> List[Dict]:
        """List config rows, optionally limited to keys or a category"""
        pass

    @abstractmethod
    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Raw string value of a key, or default when the key does not exist"""
        pass

    @abstractmethod
    def get_values(self, keys: Iterable[str]) -> Dict[str, str]:
        """Map of key to raw string value for the keys that exist"""
        pass

    @abstractmethod
    def set_value(
        self,
        key: str,
        value: str,
        user_id: Optional[Any] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        create: bool = True
    ) -> Tuple[bool, str]:
        """
        Write a config value

        Args:
            key: Config key
            value: New value, stored as a string
            user_id: Acting staff user, recorded on the row and in the audit trail
            description: Optional description, only applied when given
            category: Optional category, only applied when given
            create: Whether a missing key may be created

        Returns:
            Tuple of (success: bool, message: str)
        """
        pass
