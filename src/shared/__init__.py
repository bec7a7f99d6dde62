"""
Shared Layer - Cross-Cutting Concerns
Configuration, error contract, logging, Redis connectivity, health
"""
