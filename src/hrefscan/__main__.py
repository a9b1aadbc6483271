from hrefscan.cli import main

main()
