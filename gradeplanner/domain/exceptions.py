class GradingConfigError(ValueError):
    pass
