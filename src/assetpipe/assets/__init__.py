"""Assets and the pipeline that registers them.

    Asset -- fixed descriptor: route, content type, producer, fingerprint
    FileBundle -- concatenation of source files, fingerprinted by stat data
    AssetPipeline -- registry, looked up by request path
    AssetLike -- structural protocol every asset satisfies
"""

from assetpipe.assets.asset import Asset
from assetpipe.assets.bundle import FileBundle
from assetpipe.assets.pipeline import AssetPipeline
from assetpipe.assets.protocol import AssetLike

__all__ = ["Asset", "AssetLike", "AssetPipeline", "FileBundle"]
