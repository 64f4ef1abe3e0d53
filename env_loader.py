"""Panel ayarlari icin .env yukleyici. Sunucu ve demo bunu ilk import etmeli."""
from pathlib import Path
from dotenv import load_dotenv

# PORT/HOST/LOG_LEVEL/KPI_SEED; kabukta tanimli degerler .env'i ezer
load_dotenv(Path(__file__).resolve().parent / ".env", override=False)
