"""
DocProcessor - runs a complete documentation generation request.
"""

from typing import Dict, Optional, Set

from . import logger
from .generation import DocumentationGenerator
from .generation_request import GenerationRequest
from .names import NameCache, NameResolver, SwiftDemangler
from .package import (
    BuildError,
    PackageInfoError,
    PackageInfoProvider,
    PackageValidationError,
    PackageValidator,
    SymbolGraphBuilder,
)
from .parsers import SymbolGraphDirectoryError
from .result import Result, ResultStatus
from .tool_config import ToolConfig

EXIT_PACKAGE_ERROR = 1
EXIT_BUILD_ERROR = 2
EXIT_GENERATION_ERROR = 3


class DocProcessor:
    """
    Processes generation requests.

    Every request follows the same pattern:
    1. Validate the package (a missing Package.swift is only tolerated with generate_only)
    2. Load target paths and public product modules from the package description
    3. Build symbol graphs unless generate_only (build failures tolerated with be_lenient)
    4. Generate one Markdown file per module
    """

    def __init__(self, name_resolver: Optional[NameResolver] = None):
        tool_config = ToolConfig()
        self.swift_path = tool_config.swift_path
        self.name_resolver = name_resolver or NameResolver(
            SwiftDemangler(
                swift_path=self.swift_path,
                timeout=tool_config.demangle_timeout,
                batch_size=tool_config.demangle_batch_size
            ),
            NameCache(tool_config.name_cache_size)
        )

    def process(self, request: GenerationRequest) -> Result:
        config = request.config
        logger.info(f"Processing generation request {request.id}: {config.to_dict()}")

        try:
            has_package = self._validate(request)
            target_paths: Dict[str, str] = {}
            include_only: Optional[Set[str]] = config.modules

            if has_package:
                provider = PackageInfoProvider(config.package_dir, self.swift_path)
                target_paths = provider.load_target_paths()
                if include_only is None:
                    include_only = set(provider.extract_public_modules())
                    logger.info(f"Documenting public product modules: {', '.join(sorted(include_only))}")
        except (PackageValidationError, PackageInfoError) as e:
            logger.error(f"Package error for request {request.id}: {e}")
            return Result(status=ResultStatus.ERROR, message=str(e), exit_code=EXIT_PACKAGE_ERROR)

        if not config.generate_only:
            try:
                SymbolGraphBuilder(config.package_dir, self.swift_path).build(
                    config.symbol_graphs_dir, verbose=config.verbose)
            except BuildError as e:
                if not config.be_lenient:
                    return Result(status=ResultStatus.ERROR, message=str(e), exit_code=EXIT_BUILD_ERROR)
                logger.warning(f"Build failed, continuing with existing symbol graphs: {e}")

        generator = DocumentationGenerator(
            symbol_graphs_dir=config.symbol_graphs_dir,
            output_dir=config.output_dir,
            target_paths=target_paths,
            include_reexported=config.include_reexported,
            name_resolver=self.name_resolver,
            max_workers=config.max_workers,
            package_dir=config.package_dir
        )

        try:
            module_results = generator.generate(include_only=include_only)
        except (SymbolGraphDirectoryError, OSError) as e:
            logger.exception(f"Error generating documentation for request {request.id}: {e}")
            return Result(status=ResultStatus.ERROR, message=str(e), exit_code=EXIT_GENERATION_ERROR)

        result = Result.from_module_results(module_results)
        logger.info(f"Request {request.id} finished: {result.status.value} ({result.message})")
        return result

    @staticmethod
    def _validate(request: GenerationRequest) -> bool:
        """True if the package is usable; raises unless generate_only allows going without it."""
        config = request.config
        try:
            PackageValidator(config.package_dir).validate()
            return True
        except PackageValidationError as e:
            if not config.generate_only:
                raise
            logger.warning(f"{e} Generating without package information.")
            return False
