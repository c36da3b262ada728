"""Small command-driven programs: battle simulation, graph and path queries, number theory, polynomials and a library ledger."""

__version__ = "0.1.0"