from dataclasses import dataclass, field
from typing import List, Optional

# What a single screen refresh shows. Modules and interfaces fill a Frame,
# the terminal backend paints it whole.

@dataclass
class TableView:
    title: str
    header: List[str]
    rows: List[List[str]]
    selected: Optional[int] = None

@dataclass
class InputBox:
    """Single line input, docked at the bottom of the screen or placed in a popup"""
    title: str
    text: str
    info: str = ""
    error: bool = False
    active: bool = False

@dataclass
class Popup:
    """Centered box drawn over the table"""
    title: str
    lines: List[str] = field(default_factory=list)
    fields: List[InputBox] = field(default_factory=list)
    style: str = "normal"

@dataclass
class Frame:
    width: int = 80
    height: int = 24
    table: Optional[TableView] = None
    popups: List[Popup] = field(default_factory=list)
    inputs: List[InputBox] = field(default_factory=list)
