from termplot.api import plot
from termplot.domain import Domain, DomainIterator
from termplot.errors import InvalidArgument, TermPlotError
from termplot.figure import Plot
from termplot.plots import Bar, Bars, Bucket, Graph, Histogram
from termplot.view import DrawView, Size, View, ViewCanvas

__all__ = [
    "Bar",
    "Bars",
    "Bucket",
    "Domain",
    "DomainIterator",
    "DrawView",
    "Graph",
    "Histogram",
    "InvalidArgument",
    "Plot",
    "Size",
    "TermPlotError",
    "View",
    "ViewCanvas",
    "plot",
]
