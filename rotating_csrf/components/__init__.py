# rotating-csrf — Components
# Atomic components exposing run_* entry points over injected ports
