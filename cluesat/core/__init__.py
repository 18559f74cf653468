"""cluesat/core: Types, configuration, exceptions and validators."""
