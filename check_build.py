"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:license: MIT

Testing suite for ML-Subset build.
"""

if __name__ == '__main__':
    import subprocess, os, sys, sysconfig

    # Check that pytest exists
    print("Setting up tests...", end=" ", flush=True)

    has_pytest = subprocess.run([sys.executable, "-m", "pytest", "--version"],
                                stdout=open(os.devnull, "wb"),
                                stderr=open(os.devnull, "wb"))

    # If not, try to install
    if has_pytest.returncode:
        print("Could not find pytest. Installing...", end=" ", flush=True)

        installation = subprocess.run([sys.executable, "-m", "pip",
                                       "install", "pytest"],
                                      stdout=open(os.devnull, "wb"),
                                      stderr=open(os.devnull, "wb"))

        if installation.returncode == 0:
            print("Installation successful.", end=" ", flush=True)
        else:
            print("Installation failed. Aborting test. "
                  "Ensure a valid version of "
                  "pytest is installed (i.e. pip install pytest).")
            sys.exit(1)

    print("Ready.", flush=True)

    # Run tests and doctests
    print("Checking build...", end=" ", flush=True)

    tests = subprocess.run([sys.executable, "-m", "pytest", "-v",
                            "--doctest-modules", "mlsubset"],
                           stdout=subprocess.PIPE,
                           stderr=subprocess.STDOUT)

    if tests.returncode == 0:
        print("Build ok.")
    else:
        print("Build failed.")
        print("Error log written to 'check_build_log.txt'.")

    with open("check_build_log.txt", "wb") as f:

        header = "-" * 21 + " Error log for testing mlsubset build " + "-" * 21
        build_start = "-" * 34 + " Build log " + "-" * 34
        python_version = "Python build: " + sys.version
        os_version = "OS platform: " + sysconfig.get_platform()

        try:
            import mlsubset
            mlsubset_version = "mlsubset version: " + mlsubset.__version__
        except ImportError as e:
            mlsubset_version = "Cannot import mlsubset. Details:\n%r" % e

        for m in [header, python_version, os_version, mlsubset_version,
                  build_start]:
            f.write(bytes(m + "\n\n", "utf-8"))

        f.write(tests.stdout)
