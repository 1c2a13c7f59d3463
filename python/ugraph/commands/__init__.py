from .traverse import TraverseCommand
from .path import ShortestPathCommand
