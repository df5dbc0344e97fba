"""Command line interface for CNIS Analyzer."""
