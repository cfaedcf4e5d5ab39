from dataclasses import dataclass


@dataclass
class Settings:
    prompt: str = "Command (type help to list commands): "
    test_mode: bool = False
    large_set_warning: int = 100
