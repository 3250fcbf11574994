"""Script to create a sample RTU project with a .SIG file for testing."""

from pathlib import Path


def create_sample_project():
    """Create a sample project tree with one node signal file."""

    # Sample signal declarations
    signals = [
        # Analog alarms - inputs unless a pattern marks them as outputs
        ("FT041_H_H", "AA"),      # Flow high-high alarm (input)
        ("LIT100_H_H", "AA"),     # Level high-high literal (output)
        ("LIT100_L_L", "AA"),     # Level low-low literal (output)
        ("PT210", "AA"),          # Pressure (input)
        ("TT305_SP", "REAL"),     # Temperature setpoint (output)
        ("TT305_SPAN", "REAL"),   # Temperature span (input)

        # Explicit analog output
        ("PUMP2", "AO"),

        # Logic alarms and booleans
        ("VALVE1_CMD", "LA"),     # Valve command (output)
        ("VALVE1_OPEN", "LA"),    # Valve open status (input)
        ("ESD_RST", "BOOL"),      # ESD reset (output)
        ("PLC_WD", "BOOL"),       # Watchdog (output)
        ("DOOR_ALM", "BOOL"),     # Door alarm (input)

        # Explicit digital output
        ("HORN1", "DO"),

        # Unrecognized type, ignored
        ("COUNTER1", "DINT"),
    ]

    project_dir = Path(__file__).parent / "sample_project"
    resource_dir = project_dir / "C" / "CWave_Micro" / "R" / "RTU_RESOURCE"
    resource_dir.mkdir(parents=True, exist_ok=True)

    lines = ["NODE=NODE01", "NOTES=sample signal file", ""]
    for name, type_tag in signals:
        lines.append(f"SIG=@GV.{name} TYPE={type_tag} DESC=sample")

    sig_path = resource_dir / "NODE01.SIG"
    sig_path.write_text("\n".join(lines) + "\n", encoding="latin-1")

    print(f"Created sample project: {project_dir}")
    print(f"Signal file: {sig_path}")
    print(f"Total signals: {len(signals)}")
    print("\nRun:")
    print(f"  dnpgen generate --path {project_dir} --node NODE01 --skip-ext")

    return sig_path


if __name__ == "__main__":
    create_sample_project()
