# Ilmquest: Q&A service that forwards questions to a hosted LLM and
# splits the reply into an answer plus suggested follow-ups.

__version__ = "0.3.0"
