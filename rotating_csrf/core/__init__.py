# rotating-csrf — Core
# Pure token/hash logic and the port interfaces it depends on
