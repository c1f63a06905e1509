"""Thread-safe: check 1000 programs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from minijava import check

programs = [
    "class M" + str(i) + " { public static void main(String[] a) { System.out.println("
    + str(i) + ("" if i % 10 else " +") + "); } }"
    for i in range(1000)
]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(check, programs))

print(f"Checked {len(results)} programs in parallel")
print("Rejected:", sum(1 for r in results if not r.ok))
