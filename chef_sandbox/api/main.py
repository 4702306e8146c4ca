from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from chef_sandbox.config import load_config
from chef_sandbox.models.errors import (
    CapabilityUnavailable,
    ConfigurationError,
    ResolutionError,
    SandboxError,
)
from chef_sandbox.providers.install import init_command, install_command
from chef_sandbox.providers.sandbox import LocalSandboxBuilder

app = FastAPI(title="chef-sandbox")

builder = LocalSandboxBuilder()
SANDBOXES: dict[str, Path] = {}


class SandboxCreateRequest(BaseModel):
    project_root: str
    config_path: str | None = None
    name: str | None = None
    run_list: list[str] | None = None
    attributes: dict[str, Any] | None = None


class SandboxCreateResponse(BaseModel):
    sandbox_id: str
    path: str


class InstallCommandRequest(BaseModel):
    project_root: str
    config_path: str | None = None


class InstallCommandResponse(BaseModel):
    install_command: str | None
    init_command: str


def _status_for(exc: SandboxError) -> int:
    if isinstance(exc, ConfigurationError):
        return 422
    if isinstance(exc, CapabilityUnavailable):
        return 503
    if isinstance(exc, ResolutionError):
        return 502
    return 500


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


@app.post("/sandboxes", response_model=SandboxCreateResponse)
def create_sandbox(request: SandboxCreateRequest) -> SandboxCreateResponse:
    try:
        config = load_config(request.config_path, request.project_root)
        suite = config.suite
        metadata = suite.run_metadata()
        overrides = {
            key: value
            for key, value in (
                ("name", request.name),
                ("run_list", request.run_list),
                ("attributes", request.attributes),
            )
            if value is not None
        }
        path = builder.create(replace(metadata, **overrides), suite.sources, config.project_root)
    except SandboxError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
    except OSError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    SANDBOXES[path.name] = path
    return SandboxCreateResponse(sandbox_id=path.name, path=str(path))


@app.delete("/sandboxes/{sandbox_id}")
def delete_sandbox(sandbox_id: str) -> dict:
    path = SANDBOXES.pop(sandbox_id, None)
    if path is None:
        raise HTTPException(status_code=404, detail=f"Unknown sandbox id: {sandbox_id}")
    builder.destroy(path)
    return {"ok": True}


@app.post("/install-command", response_model=InstallCommandResponse)
def render_install_command(request: InstallCommandRequest) -> InstallCommandResponse:
    try:
        config = load_config(request.config_path, request.project_root)
    except SandboxError as exc:
        raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
    return InstallCommandResponse(
        install_command=install_command(config.provisioner),
        init_command=init_command(config.provisioner),
    )
