"""Amazon Translate translator."""

import asyncio
from typing import Any

import boto3

from .base import BaseTranslator


class AWSTranslator(BaseTranslator):
    """Translator using the Amazon Translate API."""

    def __init__(
        self,
        region: str = "ap-northeast-1",
        source_language: str = "auto",
    ):
        self.region = region
        self.source_language = source_language
        self._client = None

    @property
    def client(self) -> Any:
        """Lazy initialization of the Translate client."""
        if self._client is None:
            self._client = boto3.client(
                "translate",
                region_name=self.region,
            )
        return self._client

    @property
    def name(self) -> str:
        return f"aws-translate:{self.region}"

    async def translate(self, text: str, target_language: str) -> str:
        """Translate text with Amazon Translate."""
        # boto3 is synchronous, run it in the default executor
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, self._translate_text, text, target_language
        )

    def _translate_text(self, text: str, target_language: str) -> str:
        response = self.client.translate_text(
            Text=text,
            SourceLanguageCode=self.source_language,
            TargetLanguageCode=target_language,
        )
        return response["TranslatedText"]
