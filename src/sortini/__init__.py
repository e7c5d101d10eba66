from .interface import IniDocument, parse
from .args import Parameters
from .section import Section
from .collections import Entries, Sections
from .entities import Comment, Entry, EntryType, NameValue, PlainText, SectionName
from .writer import export
from .sorting import sort
from .globals import SortDirection, StringComparison
