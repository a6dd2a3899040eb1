# streamscope/services/api/deps.py
from __future__ import annotations
from fastapi import Depends

from streamscope.domain.ports.manifest import ManifestClassifierPort
from streamscope.domain.ports.probe import MediaProbePort
from streamscope.services.analysis.service import AnalysisService
from streamscope.services.manifest.classifier import LightManifestClassifier
from streamscope.services.manifest.light_fetch import HttpxRangeFetcher
from streamscope.services.probe.ffprobe_adapter import FFprobeAdapter


def get_media_probe() -> MediaProbePort:
    """
    Provide a MediaProbePort implementation (ffprobe) via DI.
    Swappable later if you add other probers.
    """
    return FFprobeAdapter()


def get_manifest_classifier() -> ManifestClassifierPort:
    """Light classifier wired to the default ranged-GET fetcher."""
    return LightManifestClassifier(fetcher=HttpxRangeFetcher())


def get_analysis_service(
    probe: MediaProbePort = Depends(get_media_probe),
    classifier: ManifestClassifierPort = Depends(get_manifest_classifier),
) -> AnalysisService:
    return AnalysisService(probe=probe, classifier=classifier)
