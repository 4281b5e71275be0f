from egyptid.decoder.extractor import try_extract

# ANSI Colors
OK = '\033[92m'
FAIL = '\033[91m'
RESET = '\033[0m'


def audit_decoder_vectors():
    print(f"\n=== DECODER VECTOR AUDIT ===\n")

    # (national_id, expected error kind or None, expected governorate)
    targets = [
        ("29902150112305", None, "Cairo"),
        ("30508018812341", None, "Foreign"),
        ("2990215011230", "InvalidFormat", None),
        ("49902150112305", "InvalidCentury", None),
        ("29913150112305", "InvalidDate", None),
        ("29902300112305", "InvalidDate", None),
        ("29902159912305", "InvalidGovernorate", None),
    ]

    passed_count = 0

    for national_id, expected_kind, expected_gov in targets:
        label = expected_kind or expected_gov
        print(f"Checking {national_id} ({label})...", end=" ")

        result = try_extract(national_id)

        if expected_kind is None:
            passed = result.ok and result.info.governorate == expected_gov
        else:
            passed = not result.ok and result.error_kind == expected_kind

        if passed:
            print(f"{OK}PASS{RESET}")
            passed_count += 1
        else:
            print(f"{FAIL}FAIL (got {result.to_dict()}){RESET}")

    print(f"\nStatus: {passed_count}/{len(targets)} vectors decoded as expected.")
    if passed_count == len(targets):
        print(f"{OK}DECODER INTEGRITY: 100%{RESET}")
    else:
        print(f"{FAIL}DECODER INCOMPLETE{RESET}")
    return passed_count == len(targets)


if __name__ == "__main__":
    audit_decoder_vectors()
