from .constants import Constants
from .vertex import Vertex, Edge
from .graph import Graph, VertexNotFoundError
