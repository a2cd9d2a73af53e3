from filedna.cli import main

raise SystemExit(main())
