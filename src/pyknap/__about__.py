__all__ = ('__title__',
           '__summary__',
           '__version__',
           '__author__',
           '__email__',
           '__license__',
           '__copyright__')

__title__: str = 'pyknap'
__summary__: str = 'Exact and heuristic solvers for knapsack and subset-sum problems'
__version__: str = '0.3.0'
__author__: str = 'The pyknap developers'
__email__: str = 'pyknap@users.noreply.github.com'
__license__: str = 'MIT'
__copyright__: str = 'Copyright {0}'.format(__author__)
