"""HTTP API for the Financial Health Analyzer."""
