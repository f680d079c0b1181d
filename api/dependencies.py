"""
FastAPI Dependencies.

Provides the PA-API client, the node and the environment credentials.
"""
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.settings import AmazonPaApiCredentials, get_amazon_pa_settings
from nodes.amazon_pa import AmazonPANode
from orchestration import WorkflowRunner
from paapi_sdk import PAAPIClient, Paapi5Client

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_paapi_client = None
_workflow_runner = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_paapi_client() -> PAAPIClient:
    global _paapi_client
    if _paapi_client is None:
        _paapi_client = Paapi5Client()
        logger.info("Created Paapi5Client instance")
    return _paapi_client


def get_amazon_pa_node() -> AmazonPANode:
    return AmazonPANode(client=get_paapi_client())


def get_workflow_runner() -> WorkflowRunner:
    global _workflow_runner
    if _workflow_runner is None:
        _workflow_runner = WorkflowRunner()
    return _workflow_runner


def get_amazon_pa_credentials() -> AmazonPaApiCredentials:
    return get_amazon_pa_settings().to_credentials()
