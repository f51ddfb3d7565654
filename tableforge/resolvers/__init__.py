from tableforge.resolvers.constraints import ConstraintResolver
from tableforge.resolvers.datatype import DataTypeResolver
from tableforge.resolvers.walker import StatementWalker

__all__ = ["ConstraintResolver", "DataTypeResolver", "StatementWalker"]
