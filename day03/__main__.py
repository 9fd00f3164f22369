from .ref import main

main()
