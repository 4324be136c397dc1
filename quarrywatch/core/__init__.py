"""Quarrywatch core — leaf algorithms, the job-state store and the task runtime."""
