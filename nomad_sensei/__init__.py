"""NomadSensei travel concierge: retrieval-augmented answers for travel questions and photos"""

__version__ = "1.0.0"
