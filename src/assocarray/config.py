"""
Configuration management for associative array containers.
"""

from typing import List, Optional
from dataclasses import dataclass, fields


@dataclass
class AssocArrayConfig:
    """Global configuration for slot-array containers."""
    
    # Storage
    default_capacity: int = 16
    growth_factor: int = 2  # Capacity multiplier when no slot is free
    
    # Logging
    log_growth: bool = True
    
    _instance: Optional['AssocArrayConfig'] = None
    
    def __post_init__(self):
        """Validate configured values."""
        self.validate()
    
    def validate(self) -> None:
        if not isinstance(self.default_capacity, int) or self.default_capacity < 1:
            raise ValueError(f"default_capacity must be a positive int, got {self.default_capacity!r}")
        if not isinstance(self.growth_factor, int) or self.growth_factor < 2:
            raise ValueError(f"growth_factor must be an int >= 2, got {self.growth_factor!r}")
    
    @classmethod
    def get_instance(cls) -> 'AssocArrayConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    @classmethod
    def settings(cls) -> List[str]:
        """Names accepted by set_defaults."""
        return [f.name for f in fields(cls) if not f.name.startswith("_")]
    
    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values. Unknown names are ignored."""
        instance = cls.get_instance()
        known = {key: value for key, value in kwargs.items() if key in cls.settings()}
        previous = {key: getattr(instance, key) for key in known}
        for key, value in known.items():
            setattr(instance, key, value)
        try:
            instance.validate()
        except ValueError:
            # Leave the singleton as it was
            for key, value in previous.items():
                setattr(instance, key, value)
            raise


# Global configuration instance
config = AssocArrayConfig.get_instance()
