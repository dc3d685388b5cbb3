import json
import random
from pathlib import Path

n_records = 100

types = ["Fruit", "Vegetable", "Grain", "Dairy"]
names = ["Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta"]

records = [
    {
        "id": i + 1,
        "name": f"{random.choice(names)} {i + 1}",
        "type": random.choice(types),
    }
    for i in range(n_records)
]

Path("data").mkdir(exist_ok=True)
Path("data/records.json").write_text(json.dumps(records, indent=2))
print("wrote data/records.json", len(records))
# Serve it with: python -m http.server 8000 --directory data
