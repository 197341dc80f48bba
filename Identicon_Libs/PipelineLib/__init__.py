"""
PipelineLib - Configuration and orchestration of identicon generation
"""

from Identicon_Libs.PipelineLib.identicon_config import (
    IdenticonConfig,
    load_config,
    load_config_from_env,
)
from Identicon_Libs.PipelineLib.identicon_pipeline import (
    default_stages,
    run_stages,
    build_identicon,
    generate_identicon,
    main,
)

__all__ = [
    "IdenticonConfig",
    "load_config",
    "load_config_from_env",
    "default_stages",
    "run_stages",
    "build_identicon",
    "generate_identicon",
    "main",
]
