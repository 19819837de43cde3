from .config import GenerationConfig


class GenerationRequest:
    def __init__(
        self,
        id: str,
        config: GenerationConfig,
        description: str = ""
    ):
        if config is None:
            raise ValueError("config is required")

        self.id = id
        self.config = config
        self.description = description
