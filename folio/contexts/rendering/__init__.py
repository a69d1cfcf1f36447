"""
Rendering Context

Responsibilities:
- Runs a full site build (content -> recent posts -> composed pages)
- Writes one index.html per route plus posts.json and static assets
- Reports build outcome through BuildResult, build.log and the build event log

Owns: Output directory layout, build orchestration
Never: Modifies content sources or templates
"""

from folio.contexts.rendering.builder import BuildResult, build_site, route_to_path

__all__ = ["BuildResult", "build_site", "route_to_path"]
