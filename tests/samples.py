"""Sorties enregistrées des utilitaires système"""


def linux_cpuinfo(sockets=1, cores=4, threads_per_socket=8,
                  model="Intel(R) Core(TM) i7-4770 CPU @ 3.40GHz"):
    blocks = []
    processor = 0
    for socket in range(sockets):
        for _ in range(threads_per_socket):
            blocks.append(
                f"processor\t: {processor}\n"
                f"vendor_id\t: GenuineIntel\n"
                f"cpu family\t: 6\n"
                f"model\t\t: 60\n"
                f"model name\t: {model}\n"
                f"physical id\t: {socket}\n"
                f"siblings\t: {threads_per_socket}\n"
                f"cpu cores\t: {cores}\n"
                f"flags\t\t: fpu vme de pse tsc\n"
            )
            processor += 1
    return "\n".join(blocks) + "\n"


LINUX_CPUINFO_NO_PHYSICAL_ID = (
    "processor\t: 0\n"
    "model name\t: ARMv8 Processor rev 1 (v8l)\n"
    "cpu cores\t: 1\n"
    "\n"
    "processor\t: 1\n"
    "model name\t: ARMv8 Processor rev 1 (v8l)\n"
    "cpu cores\t: 1\n"
)

LINUX_CPUINFO_NO_MODEL = (
    "processor\t: 0\n"
    "physical id\t: 0\n"
    "cpu cores\t: 1\n"
)

MACOS_SOFTWARE = """Software:

    System Software Overview:

      System Version: macOS 10.15.7 (19H2)
      Kernel Version: Darwin 19.6.0
      Boot Volume: Macintosh HD
      Boot Mode: Normal
      Computer Name: MacBook Pro
      Secure Virtual Memory: Enabled
      Time since boot: 3 days 2:11

"""

MACOS_HARDWARE_HT = """Hardware:

    Hardware Overview:

      Model Name: MacBook Pro
      Model Identifier: MacBookPro15,1
      Processor Name: 6-Core Intel Core i7
      Processor Speed: 2.6 GHz
      Number of Processors: 1
      Total Number of Cores: 6
      L2 Cache (per Core): 256 KB
      L3 Cache: 9 MB
      Hyper-Threading Technology: Enabled
      Memory: 16 GB

"""

MACOS_HARDWARE_NO_HT = """Hardware:

    Hardware Overview:

      Model Name: iMac
      Model Identifier: iMac17,1
      Processor Name: Quad-Core Intel Core i5
      Processor Speed: 3.2 GHz
      Number of Processors: 1
      Total Number of Cores: 4
      L2 Cache (per Core): 256 KB
      Memory: 8 GB

"""

MACOS_HARDWARE_HT_DISABLED = MACOS_HARDWARE_HT.replace(
    "Hyper-Threading Technology: Enabled", "Hyper-Threading Technology: Disabled")

MACOS_HARDWARE_DUAL_SOCKET = """Hardware:

    Hardware Overview:

      Model Name: Mac Pro
      Processor Name: 6-Core Intel Xeon
      Number of Processors: 2
      Total Number of Cores: 12
      Hyper-Threading Technology: Enabled

"""

MACOS_HARDWARE_APPLE_SILICON = """Hardware:

    Hardware Overview:

      Model Name: MacBook Air
      Chip: Apple M1
      Total Number of Cores: 8 (4 performance and 4 efficiency)
      Memory: 8 GB

"""
