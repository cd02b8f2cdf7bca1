"""Thread safe — scan 1000 templates in parallel."""

from concurrent.futures import ThreadPoolExecutor

from tessera import scan

docs = ["<p>Doc " + str(i) + ": {{ items[[" + str(i) + "]] }}</p>" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(scan, docs))

print(f"Scanned {len(results)} templates in parallel")
print("First template pieces:", results[0])
