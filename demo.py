from passto import AlgorithmSettings, PasstoEngine, derive, Zip, CustomAlphabet, HashingAlgorithm

print("--- Passto Live Demo ---")

passphrase = b"my-secret"

# 1. Default settings: SHA-256 over passphrase + service, base64
password = derive(passphrase, b"example.com")
print(f"[+] example.com (defaults): {password}")

# 2. Same inputs, same password
assert derive(passphrase, b"example.com") == password
print("[+] Re-derived identical password")

# 3. Custom settings
settings = AlgorithmSettings(
    hashing=HashingAlgorithm.SHA512,
    digest=CustomAlphabet("abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ23456789"),
    salting=Zip(4),
    max_length=20,
    hashing_iterations=1000,
)
engine = PasstoEngine(settings)
print(f"[+] mail.example.com (custom): {engine.derive(passphrase, b'mail.example.com')}")

# 4. Save and restore settings
saved = engine.settings_string()
print(f"[*] Saved settings: {saved}")
restored = PasstoEngine.from_settings_string(saved)
assert restored.derive(passphrase, b"mail.example.com") == engine.derive(passphrase, b"mail.example.com")
print("[+] Restored settings reproduce the password")

print("--- Demo Complete ---")
