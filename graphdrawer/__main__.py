from graphdrawer.cli import main

raise SystemExit(main())
