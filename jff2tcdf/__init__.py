"""jff2tcdf - convert JFLAP finite automata to the ToyCompile DFA format."""

__version__ = "1.0.0"
