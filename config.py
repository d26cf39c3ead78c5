import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
LESSON_MODEL = os.getenv("LESSON_MODEL", "gpt-4o-mini")
LESSON_TEMPERATURE = float(os.getenv("LESSON_TEMPERATURE", "0.7"))
RECOMMENDATION_DELAY_SECONDS = float(os.getenv("RECOMMENDATION_DELAY_SECONDS", "1.5"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
