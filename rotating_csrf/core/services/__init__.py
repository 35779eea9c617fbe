# rotating-csrf — Services (Core Services)
# Token generation and hash derivation; no I/O, no environment access
