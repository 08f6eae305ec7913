"""Todo domain entity"""
from dataclasses import dataclass


@dataclass
class Todo:
    """Todo domain entity"""
    id: int
    title: str
    done: bool = False
