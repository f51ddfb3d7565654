from abc import ABC, abstractmethod
from tableforge.parsers.tree import Root

class BaseParser(ABC):
    @abstractmethod
    def parse(self, sql_content: str) -> Root:
        """Parses SQL content and returns the syntax tree of every statement."""
        pass
