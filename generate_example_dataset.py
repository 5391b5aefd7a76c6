import random
import sys

from faker import Faker

if __name__ == "__main__":
    fake = Faker()
    n = int(sys.argv[1])
    names = [fake.unique.name() for _ in range(n)]

    with open("example_keys.txt", "w", encoding="utf8") as f:
        for name in names:
            f.write(name + "\n")

    # delete every other key in a different order than they were inserted
    deletes = names[::2]
    random.shuffle(deletes)
    with open("example_deletes.txt", "w", encoding="utf8") as f:
        for name in deletes:
            f.write(name + "\n")
