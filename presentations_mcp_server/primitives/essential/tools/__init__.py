"""Essential tool modules. Each exposes a register_*_tool(registry, ...) function."""
