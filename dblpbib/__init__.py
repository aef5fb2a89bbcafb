"""dblpbib package.

Fetches bibliographic records from DBLP for the citation keys of a LaTeX
document and writes them as clean BibTeX.
"""

__version__ = "0.1.0"
