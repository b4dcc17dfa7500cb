"""
Configuration settings for solver diagnostics and input
handling.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import os
import platform

from pyknap import __version__

_false_strings = ("0",
                  "off", "Off", "OFF",
                  "no", "No", "NO",
                  "false", "False", "FALSE")
_true_strings = ("1",
                 "on", "On", "ON",
                 "yes", "Yes", "YES",
                 "true", "True", "TRUE")

class Configuration(object):
    """The main configuration object.

    Attributes
    ----------
    TRACE : bool
        Indicates whether or not solvers emit per-round
        trace records (e.g., the portion taken of each item
        or every reachable-sum row) to the ``pyknap`` logger
        at DEBUG level. These records never change
        results. (default: False)
    GREEDY_K : int
        The size limit of fixed subsets used by the
        greedy-k heuristic when no k is given.
        (default: 2)
    CSV_DELIMITER : str
        The field delimiter used when reading items from a
        CSV file. (default: ",")
    """
    __slots__ = ("TRACE",
                 "GREEDY_K",
                 "CSV_DELIMITER")

    def __init__(self):
        self.reset()

    def reset(self, use_environment=True):
        """Reset the configuration to default settings.

        Parameters
        ----------
        use_environment : bool, optional
            Controls whether or not to check for environment
            variables to overwrite the default
            settings. (default: True)
        """
        self.TRACE = False
        self.GREEDY_K = 2
        self.CSV_DELIMITER = ","
        if use_environment:
            # process environment variables
            prefix = "PYKNAP_"
            for symbol in self.__slots__:
                if prefix+symbol in os.environ:
                    default = getattr(self, symbol)
                    value = os.environ[prefix+symbol]
                    if symbol == "TRACE":
                        if value in _false_strings:
                            value = False
                        elif value in _true_strings:
                            value = True
                        else:
                            raise ValueError(
                                "invalid boolean value: %s%s=%s"
                                % (prefix, symbol, value))
                    else:
                        value = type(default)(value)
                    if (symbol == "GREEDY_K") and (value < 0):
                        raise ValueError(
                            "invalid value: %s%s=%s (must be "
                            "non-negative)"
                            % (prefix, symbol, value))
                    setattr(self, symbol, value)

    def __str__(self):
        out =  "pyknap version: %s\n" % __version__
        out += ("loaded from: %s\n"
                % (os.path.dirname(__file__)))
        out += ("python version: %s %s (%s, %s)\n"
                % (platform.python_implementation(),
                   platform.python_version(),
                   platform.system(),
                   os.name))
        out += "configuration:"
        for key in self.__slots__:
            out += ("\n - %s: %r" % (key,
                                     getattr(self, key)))
        return out

config = Configuration()

if __name__ == "__main__":                        #pragma:nocover
    print(config)
