# rotating-csrf — Adapters
# Concrete implementations of the core ports
