import logging

from afinn import Afinn

from .errors import ScoringError

logger = logging.getLogger("smartchat")


class SentimentScorer:
    """
    Lexicon-based sentiment scoring (AFINN).
    Positive scores mean a favorable tone, negative unfavorable, 0 neutral.
    """

    def __init__(self, analyzer=None):
        self._analyzer = analyzer or Afinn(emoticons=True)

    def analyze(self, text):
        """Raw score from the analyzer, raising ScoringError on failure."""
        try:
            return int(round(self._analyzer.score(text)))
        except Exception as e:
            raise ScoringError(str(e)) from e

    def score(self, text):
        """Score text, defaulting to 0 so scoring never blocks delivery."""
        if not text:
            return 0
        try:
            return self.analyze(text)
        except ScoringError as e:
            logger.warning("Sentiment scoring failed, defaulting to 0: %s", e)
            return 0
