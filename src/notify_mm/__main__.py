from notify_mm.app import main

main()
