"""Azure-specific utility functions."""
from app.config import settings
from core.utils.logger import logger


def get_document_intelligence_client():
    """
    Create and return Azure Document Intelligence client.

    Returns:
        DocumentIntelligenceClient instance or None if configuration is missing
    """
    if not settings.AZURE_DOCUMENT_INTELLIGENCE_ENDPOINT or not settings.AZURE_DOCUMENT_INTELLIGENCE_KEY:
        logger.info("Azure Document Intelligence not configured, using local PDF extraction")
        return None

    endpoint = settings.AZURE_DOCUMENT_INTELLIGENCE_ENDPOINT
    if not endpoint.startswith(('https://', 'http://')):
        logger.error(f"Invalid Azure Document Intelligence endpoint format: {endpoint}")
        return None

    try:
        from azure.ai.documentintelligence import DocumentIntelligenceClient
        from azure.core.credentials import AzureKeyCredential

        credential = AzureKeyCredential(settings.AZURE_DOCUMENT_INTELLIGENCE_KEY)
        client = DocumentIntelligenceClient(
            endpoint=endpoint,
            credential=credential
        )
        logger.debug(f"Azure Document Intelligence client initialized for endpoint: {endpoint}")
        return client
    except ImportError:
        logger.error("Azure Document Intelligence SDK not available")
        return None
