"""Config: settings carregadas do ambiente e setup de logging."""
